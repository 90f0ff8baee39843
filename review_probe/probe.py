"""API surface validator run on every pull request."""

from dataclasses import dataclass
from typing import Any, Optional

from .capabilities import REQUIRED_CAPABILITIES, has_capability
from .config import get_logger
from .errors import ApiCallFailedError, MissingCapabilityError

logger = get_logger("probe")


@dataclass
class ProbeResult:
    """Outcome of a successful probe."""
    owner: str
    repo: str
    first_pull: Optional[Any] = None

    @property
    def found_pulls(self) -> bool:
        return self.first_pull is not None


def validate(client: Any, owner: str, repo: str) -> ProbeResult:
    """
    Check the client still has the review methods, then list pull requests once.

    Args:
        client: Pull-request client handle (see capabilities.PullRequestsAPI)
        owner: Repository owner login
        repo: Repository name

    Returns:
        ProbeResult with the first pull request returned, if any

    Raises:
        MissingCapabilityError: the client lacks a required method
        ApiCallFailedError: the list call raised
    """
    for capability in REQUIRED_CAPABILITIES:
        if not has_capability(client, capability):
            raise MissingCapabilityError(capability.name)

    # If the following works, the client is probably fine.
    try:
        pulls = client.list(owner, repo)
    except Exception as e:
        raise ApiCallFailedError(e) from e

    result = ProbeResult(owner=owner, repo=repo)
    if pulls:
        result.first_pull = pulls[0]
        logger.info(f"First pull request in {owner}/{repo}: {result.first_pull}")

    return result
