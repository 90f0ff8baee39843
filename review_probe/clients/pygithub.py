"""Pull-request client backed by PyGithub.

Review methods are only defined when the installed PyGithub still has the
methods they wrap, so a library upgrade that drops one shows up as a
missing capability instead of an AttributeError at approve time.
"""

from __future__ import annotations

from typing import Any

from github import Auth, Github
from github.PullRequest import PullRequest

from ..config import DEFAULT_API_URL, get_logger

logger = get_logger("pygithub")


class PyGithubPullsClient:
    """Adapter from PyGithub's object model to owner/repo/number calls."""

    def __init__(self, gh: Github):
        self._gh = gh

    @classmethod
    def from_token(cls, token: str, base_url: str = DEFAULT_API_URL) -> "PyGithubPullsClient":
        return cls(Github(auth=Auth.Token(token), base_url=base_url))

    def close(self) -> None:
        self._gh.close()

    def _repo(self, owner: str, repo: str):
        return self._gh.get_repo(f"{owner}/{repo}")

    def _pull(self, owner: str, repo: str, pull_number: int):
        return self._repo(owner, repo).get_pull(pull_number)

    def list(self, owner: str, repo: str) -> list[dict]:
        """List open pull requests (first page) as raw API dicts."""
        logger.debug(f"get_pulls {owner}/{repo}")
        pulls = self._repo(owner, repo).get_pulls(state="open")
        return [pull.raw_data for pull in pulls.get_page(0)]

    if hasattr(PullRequest, "get_reviews"):
        def list_reviews(self, owner: str, repo: str, pull_number: int) -> list[dict]:
            return [review.raw_data for review in self._pull(owner, repo, pull_number).get_reviews()]

    if hasattr(PullRequest, "create_review"):
        def create_review(
            self,
            owner: str,
            repo: str,
            pull_number: int,
            event: str = "APPROVE",
            body: str = "",
        ) -> Any:
            return self._pull(owner, repo, pull_number).create_review(body=body, event=event)
