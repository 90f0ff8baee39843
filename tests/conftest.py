from __future__ import annotations

import json

import httpx
import pytest

from review_probe import config
from review_probe.clients import RestPullsClient


class FakePullsClient:
    """Client double with both review methods and a canned list result."""

    def __init__(self, pulls=None, error: Exception | None = None) -> None:
        self.pulls = [] if pulls is None else pulls
        self.error = error
        self.list_calls: list[tuple[str, str]] = []
        self.review_calls = 0

    def list(self, owner, repo):
        self.list_calls.append((owner, repo))
        if self.error is not None:
            raise self.error
        return self.pulls

    def list_reviews(self, owner, repo, pull_number):
        self.review_calls += 1
        return []

    def create_review(self, owner, repo, pull_number, event="APPROVE", body=""):
        self.review_calls += 1
        return {}

    def close(self) -> None:
        pass


def pull(number: int, title: str = "Bump httpx") -> dict:
    return {"number": number, "title": title, "user": {"login": "dependabot[bot]"}}


def pr_event(owner: str = "octo-org", name: str = "widgets") -> dict:
    return {
        "action": "opened",
        "number": 7,
        "pull_request": {"number": 7},
        "repository": {"name": name, "full_name": f"{owner}/{name}", "owner": {"login": owner}},
    }


def rest_client(handler) -> RestPullsClient:
    return RestPullsClient("test-token", base_url="https://api.github.test", transport=httpx.MockTransport(handler))


@pytest.fixture
def event_file(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pr_event()), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in (
        "GITHUB_TOKEN",
        "GITHUB_API_URL",
        "GITHUB_EVENT_PATH",
        "GITHUB_REPOSITORY",
        "REVIEW_PROBE_BACKEND",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "LOGS_DIR", tmp_path / "logs")
