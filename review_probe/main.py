#!/usr/bin/env python3
"""
review-probe: check the pull-request API surface the auto-approve workflow uses.

Commands:
    review-probe check          - Verify review methods exist and list pull requests once
    review-probe capabilities   - Show which review methods a backend's client has
    review-probe workflow       - Print the GitHub Actions workflow that runs the check
"""

import sys
import typer
from rich.console import Console

from .config import setup_logging, get_logger

app = typer.Typer(
    name="review-probe",
    help="Check the pull-request API surface used to auto-approve Dependabot PRs",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(ctx: typer.Context):
    """Initialize logging for all commands."""
    command_name = ctx.invoked_subcommand or "review-probe"
    setup_logging(command_name)
    logger = get_logger()
    logger.info(f"Running: review-probe {' '.join(sys.argv[1:])}")


@app.command("check")
def check(
    owner: str = typer.Option(None, "--owner", "-o", help="Repository owner (default: from event payload)"),
    repo: str = typer.Option(None, "--repo", "-r", help="Repository name (default: from event payload)"),
    event_path: str = typer.Option(None, "--event-path", "-e", help="Webhook payload JSON (default: $GITHUB_EVENT_PATH)"),
    backend: str = typer.Option(None, "--backend", "-b", help="Client backend: rest or pygithub (default: $REVIEW_PROBE_BACKEND or rest)"),
    api_url: str = typer.Option(None, "--api-url", help="GitHub API base URL (default: $GITHUB_API_URL)"),
):
    """Verify listReviews/createReview exist, then list pull requests once."""
    from .commands.check import run_check
    raise SystemExit(run_check(owner, repo, event_path, backend, api_url))


@app.command("capabilities")
def capabilities(
    backend: str = typer.Option(None, "--backend", "-b", help="Client backend: rest or pygithub"),
):
    """Show which required review methods the backend's client exposes."""
    from .commands.capabilities import show_capabilities
    raise SystemExit(show_capabilities(backend))


@app.command("workflow")
def workflow(
    output: str = typer.Option(None, "--output", "-O", help="Write to this path instead of stdout"),
    python_version: str = typer.Option("3.12", "--python", help="Python version for actions/setup-python"),
):
    """Print the GitHub Actions workflow that runs the check on every pull request."""
    from .commands.workflow import write_workflow
    raise SystemExit(write_workflow(output, python_version))


if __name__ == "__main__":
    app()
