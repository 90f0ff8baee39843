"""Report the review capabilities a backend's client exposes."""

from rich.console import Console
from rich.table import Table

from ..capabilities import LIST_PULLS, REQUIRED_CAPABILITIES, has_capability, missing_capabilities
from ..clients import build_client
from ..config import DEFAULT_API_URL, get_backend
from ..errors import ConfigError

console = Console()


def show_capabilities(backend=None) -> int:
    """Print a table of capabilities. Returns 1 if any required one is missing."""
    backend = backend or get_backend()
    try:
        # No request is made, so a placeholder token is enough
        client = build_client(backend, "unused", DEFAULT_API_URL)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    try:
        table = Table(title=f"{type(client).__name__} ({backend})")
        table.add_column("Capability", style="cyan")
        table.add_column("Method")
        table.add_column("Required", justify="center")
        table.add_column("Present", justify="center")

        for capability in (LIST_PULLS, *REQUIRED_CAPABILITIES):
            required = capability in REQUIRED_CAPABILITIES
            present = has_capability(client, capability)
            table.add_row(
                capability.name,
                capability.attribute,
                "yes" if required else "",
                "[green]✓[/green]" if present else "[red]✗[/red]",
            )
        missing = missing_capabilities(client)
    finally:
        client.close()

    console.print(table)
    if missing:
        names = ", ".join(c.name for c in missing)
        console.print(f"[red]Missing: {names}[/red]")
        return 1
    return 0
