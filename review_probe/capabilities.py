"""Capabilities the auto-approve workflow needs from a pull-request client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Capability:
    """A named remote operation and the method that implements it."""
    name: str
    attribute: str


LIST_PULLS = Capability("list", "list")
LIST_REVIEWS = Capability("listReviews", "list_reviews")
CREATE_REVIEW = Capability("createReview", "create_review")

# Checked in this order; the first missing one fails the probe.
REQUIRED_CAPABILITIES = (LIST_REVIEWS, CREATE_REVIEW)


@runtime_checkable
class PullRequestsAPI(Protocol):
    """Full surface the auto-approve workflow relies on."""

    def list(self, owner: str, repo: str) -> list[Any]: ...

    def list_reviews(self, owner: str, repo: str, pull_number: int) -> list[Any]: ...

    def create_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        event: str = "APPROVE",
        body: str = "",
    ) -> Any: ...


def has_capability(client: Any, capability: Capability) -> bool:
    """Return True if `client` exposes a callable for `capability`."""
    return callable(getattr(client, capability.attribute, None))


def missing_capabilities(client: Any) -> list[Capability]:
    """All required capabilities the client lacks, in check order."""
    return [cap for cap in REQUIRED_CAPABILITIES if not has_capability(client, cap)]
