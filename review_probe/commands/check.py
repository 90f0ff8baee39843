"""Run the API surface probe against the repository of the triggering event."""

from rich.console import Console

from ..clients import build_client
from ..config import (
    get_api_url,
    get_backend,
    get_logger,
    require_github_token,
    resolve_event_context,
)
from ..errors import ReviewProbeError
from ..probe import validate

console = Console()
logger = get_logger("check")


def run_check(owner=None, repo=None, event_path=None, backend=None, api_url=None) -> int:
    """Run the probe. Returns the process exit code."""
    client = None
    try:
        context = resolve_event_context(owner, repo, event_path)
        token = require_github_token()
        backend = backend or get_backend()
        client = build_client(backend, token, api_url or get_api_url())

        console.print(f"Probing [cyan]{context.full_name}[/cyan] with the [bold]{backend}[/bold] client...")
        result = validate(client, context.owner, context.repo)
    except ReviewProbeError as e:
        logger.error(f"Probe failed: {e}")
        console.print(f"[red]✗ {e}[/red]")
        return 1
    finally:
        if client is not None:
            client.close()

    console.print("[green]✓[/green] listReviews and createReview are available")
    if result.found_pulls:
        first = result.first_pull
        number = first.get("number") if isinstance(first, dict) else getattr(first, "number", None)
        console.print(f"[green]✓[/green] Listed pull requests (first: #{number})")
        if isinstance(first, dict):
            console.print_json(data=first)
        else:
            console.print(repr(first), markup=False)
    else:
        console.print("[green]✓[/green] Listed pull requests (none open)")
    return 0
