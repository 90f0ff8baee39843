from __future__ import annotations

import importlib
from unittest.mock import MagicMock

import pytest
from github.PullRequest import PullRequest

from review_probe import MissingCapabilityError, validate
from review_probe.capabilities import (
    CREATE_REVIEW,
    LIST_REVIEWS,
    REQUIRED_CAPABILITIES,
    PullRequestsAPI,
    has_capability,
    missing_capabilities,
)
from review_probe.clients import RestPullsClient
from review_probe.clients import pygithub as pygithub_module
from review_probe.clients.pygithub import PyGithubPullsClient

from .conftest import FakePullsClient


def test_required_capabilities_are_checked_in_order() -> None:
    assert [c.name for c in REQUIRED_CAPABILITIES] == ["listReviews", "createReview"]


def test_missing_capabilities_lists_all_absent() -> None:
    class Bare:
        pass

    assert missing_capabilities(Bare()) == [LIST_REVIEWS, CREATE_REVIEW]
    assert missing_capabilities(FakePullsClient()) == []


def test_has_capability_ignores_plain_attributes() -> None:
    class Shadowed:
        list_reviews = "not a method"

    assert not has_capability(Shadowed(), LIST_REVIEWS)


def test_concrete_clients_satisfy_protocol() -> None:
    rest = RestPullsClient("t")
    try:
        assert isinstance(rest, PullRequestsAPI)
        assert missing_capabilities(rest) == []
    finally:
        rest.close()

    assert isinstance(FakePullsClient(), PullRequestsAPI)


def test_pygithub_client_exposes_review_methods() -> None:
    client = PyGithubPullsClient.from_token("t")
    try:
        assert missing_capabilities(client) == []
    finally:
        client.close()


@pytest.fixture
def reload_pygithub_without(monkeypatch):
    """Reload the PyGithub client module with PullRequest methods removed."""
    original = pygithub_module.PyGithubPullsClient

    def _reload(*methods: str):
        for method in methods:
            monkeypatch.delattr(PullRequest, method)
        return importlib.reload(pygithub_module).PyGithubPullsClient

    yield _reload
    pygithub_module.PyGithubPullsClient = original


def test_pygithub_without_create_review_misses_capability(reload_pygithub_without) -> None:
    client_cls = reload_pygithub_without("create_review")
    gh = MagicMock()
    client = client_cls(gh)

    assert missing_capabilities(client) == [CREATE_REVIEW]
    with pytest.raises(MissingCapabilityError) as excinfo:
        validate(client, "octo-org", "widgets")
    assert excinfo.value.name == "createReview"
    gh.get_repo.assert_not_called()


def test_pygithub_without_get_reviews_misses_list_reviews(reload_pygithub_without) -> None:
    client_cls = reload_pygithub_without("get_reviews")
    client = client_cls(MagicMock())

    assert missing_capabilities(client) == [LIST_REVIEWS]
    with pytest.raises(MissingCapabilityError) as excinfo:
        validate(client, "octo-org", "widgets")
    assert excinfo.value.name == "listReviews"
