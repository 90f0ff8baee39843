"""Generate the GitHub Actions workflow that runs review-probe on pull requests."""

from pathlib import Path

import yaml
from rich.console import Console

console = Console(stderr=True)

WORKFLOW_NAME = "Validate Auto-Approve Dependabot"

WORKFLOW_HEADER = (
    "# Generated by `review-probe workflow`.\n"
    "# The auto-approve workflow broke once when its API client changed under it;\n"
    "# this makes sure the review methods are still there.\n"
)


def build_workflow(python_version: str = "3.12") -> dict:
    """Workflow definition: read-only PR permission, runs on every pull request."""
    return {
        "name": WORKFLOW_NAME,
        "permissions": {"pull-requests": "read"},
        "on": {"pull_request": None},
        "jobs": {
            "validate-approve-dependabot": {
                "runs-on": "ubuntu-latest",
                "steps": [
                    {"uses": "actions/checkout@v4"},
                    {
                        "uses": "actions/setup-python@v5",
                        "with": {"python-version": python_version},
                    },
                    {"name": "Install review-probe", "run": "pip install ."},
                    {
                        "name": "Validate API",
                        "run": "review-probe check",
                        "env": {"GITHUB_TOKEN": "${{ secrets.GITHUB_TOKEN }}"},
                    },
                ],
            }
        },
    }


def render_workflow(python_version: str = "3.12") -> str:
    return WORKFLOW_HEADER + yaml.safe_dump(build_workflow(python_version), sort_keys=False)


def write_workflow(output=None, python_version: str = "3.12") -> int:
    """Print the workflow YAML, or write it to `output`."""
    text = render_workflow(python_version)
    if output is None:
        print(text, end="")
        return 0

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    console.print(f"[green]Wrote {path}[/green]")
    return 0
