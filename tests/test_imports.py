from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "review_probe",
        "review_probe.capabilities",
        "review_probe.clients",
        "review_probe.clients.rest",
        "review_probe.clients.pygithub",
        "review_probe.main",
    ],
)
def test_modules_import(module) -> None:
    importlib.import_module(module)


def test_both_clients_build() -> None:
    from review_probe.clients import RestPullsClient, build_client
    from review_probe.clients.pygithub import PyGithubPullsClient

    rest = build_client("rest", "t", "https://api.github.com")
    gh = build_client("pygithub", "t", "https://api.github.com")
    try:
        assert type(rest).__name__ == RestPullsClient.__name__
        assert type(gh).__name__ == PyGithubPullsClient.__name__
        assert callable(rest.list) and callable(gh.list)
    finally:
        rest.close()
        gh.close()
