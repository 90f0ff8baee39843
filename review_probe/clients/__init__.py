"""Pull-request client handles the probe can run against."""

from ..config import BACKENDS
from ..errors import ConfigError
from .rest import RestPullsClient


def build_client(backend: str, token: str, api_url: str):
    """Build the client handle for a backend name ("rest" or "pygithub")."""
    if backend == "rest":
        return RestPullsClient(token, base_url=api_url)
    if backend == "pygithub":
        from .pygithub import PyGithubPullsClient
        return PyGithubPullsClient.from_token(token, base_url=api_url)
    raise ConfigError(f"Unknown backend {backend!r}, expected one of: {', '.join(BACKENDS)}")


__all__ = ["RestPullsClient", "build_client"]
