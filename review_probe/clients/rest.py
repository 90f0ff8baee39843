"""Pull-request endpoints of the GitHub REST API over httpx."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..config import DEFAULT_API_URL, get_logger
from ..errors import GitHubAPIError

logger = get_logger("rest")

API_VERSION = "2022-11-28"


class RestPullsClient:
    """Thin client for /repos/{owner}/{repo}/pulls and its reviews."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        logger.debug(f"{method} {path}")
        response = self._client.request(method, path, **kwargs)
        if response.is_success:
            return response.json()

        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("message"):
            message = data["message"]
        else:
            message = response.text[:100]
        raise GitHubAPIError(response.status_code, message)

    def list(self, owner: str, repo: str) -> list[dict]:
        """List open pull requests (first page)."""
        return self._request("GET", f"/repos/{owner}/{repo}/pulls")

    def list_reviews(self, owner: str, repo: str, pull_number: int) -> list[dict]:
        return self._request("GET", f"/repos/{owner}/{repo}/pulls/{pull_number}/reviews")

    def create_review(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        event: str = "APPROVE",
        body: str = "",
    ) -> dict:
        payload = {"event": event}
        if body:
            payload["body"] = body
        return self._request(
            "POST",
            f"/repos/{owner}/{repo}/pulls/{pull_number}/reviews",
            json=payload,
        )
