"""Pull-request API surface probe for the Dependabot auto-approve workflow."""

from .errors import (
    ApiCallFailedError,
    ConfigError,
    GitHubAPIError,
    MissingCapabilityError,
    ReviewProbeError,
    ValidationError,
)
from .probe import ProbeResult, validate

__version__ = "0.1.0"

__all__ = [
    "ApiCallFailedError",
    "ConfigError",
    "GitHubAPIError",
    "MissingCapabilityError",
    "ProbeResult",
    "ReviewProbeError",
    "ValidationError",
    "validate",
]
