"""Exception hierarchy for review-probe."""


class ReviewProbeError(Exception):
    """Base class for everything the CLI reports as a failed run."""


class ConfigError(ReviewProbeError):
    """Missing token, unreadable event payload, or an unknown backend."""


class ValidationError(ReviewProbeError):
    """The probe itself failed."""


class MissingCapabilityError(ValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"`{name}` not found.")


class ApiCallFailedError(ValidationError):
    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"List pull requests call failed: {cause}")


class GitHubAPIError(ReviewProbeError):
    """Non-2xx response from the GitHub REST API."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"GitHub API returned {status_code}: {message}")
