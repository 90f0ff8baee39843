"""Configuration, event context and logging for review-probe."""

import json
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

# Load .env from the working directory; real environment variables win
load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_BACKEND = "rest"
BACKENDS = ("rest", "pygithub")

# owner/repo as in GITHUB_REPOSITORY, optionally as a github.com URL
REPO_SLUG_PATTERN = re.compile(
    r"^(?:(?:https?://)?(?:www\.)?github\.com/)?([\w.-]+)/([\w.-]+?)(?:\.git)?/?$",
    re.IGNORECASE,
)

LOGS_DIR = Path(os.environ.get("REVIEW_PROBE_LOG_DIR", "logs"))


@dataclass(frozen=True)
class EventContext:
    """Repository the triggering pull-request event belongs to."""
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


# Environment variables
def get_github_token() -> Optional[str]:
    """Get GitHub token from environment."""
    return os.environ.get("GITHUB_TOKEN")


def require_github_token() -> str:
    """Return the GitHub token, or raise ConfigError if none is set.

    CI runs are non-interactive, so there is no prompt fallback.
    """
    token = get_github_token()
    if not token:
        raise ConfigError(
            "GITHUB_TOKEN is not set. "
            "Pass secrets.GITHUB_TOKEN to the job or export a token locally."
        )
    return token


def get_api_url() -> str:
    return os.environ.get("GITHUB_API_URL") or DEFAULT_API_URL


def get_backend() -> str:
    return os.environ.get("REVIEW_PROBE_BACKEND") or DEFAULT_BACKEND


def load_event_context(event_path) -> EventContext:
    """Read owner and repo name from a pull-request webhook payload file."""
    path = Path(event_path)
    if not path.exists():
        raise ConfigError(f"Event payload not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Event payload is not valid JSON: {path} ({e})") from e
    except OSError as e:
        raise ConfigError(f"Cannot read event payload: {path} ({e})") from e

    return event_context_from_payload(payload)


def event_context_from_payload(payload: dict) -> EventContext:
    """Extract repository.owner.login and repository.name from a payload."""
    repository = payload.get("repository") if isinstance(payload, dict) else None
    if not isinstance(repository, dict):
        raise ConfigError("Event payload has no repository")

    owner = repository.get("owner")
    if not isinstance(owner, dict):
        raise ConfigError("Event payload repository has no owner")

    return _make_context(owner.get("login", ""), repository.get("name", ""))


def event_context_from_slug(slug: str) -> EventContext:
    """Build an EventContext from owner/repo shorthand or a GitHub URL."""
    match = REPO_SLUG_PATTERN.match(slug.strip())
    if not match:
        raise ConfigError(f"Invalid repository slug: {slug!r}")
    return _make_context(match.group(1), match.group(2))


def _make_context(owner, repo) -> EventContext:
    if not isinstance(owner, str) or not owner.strip():
        raise ConfigError("Repository owner login is empty")
    if not isinstance(repo, str) or not repo.strip():
        raise ConfigError("Repository name is empty")
    return EventContext(owner=owner.strip(), repo=repo.strip())


def resolve_event_context(
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    event_path: Optional[str] = None,
) -> EventContext:
    """Work out which repository to probe.

    Order: explicit owner and repo, then the event payload file
    (argument or GITHUB_EVENT_PATH), then GITHUB_REPOSITORY.
    """
    if owner or repo:
        return _make_context(owner or "", repo or "")

    event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
    if event_path:
        return load_event_context(event_path)

    slug = os.environ.get("GITHUB_REPOSITORY")
    if slug:
        return event_context_from_slug(slug)

    raise ConfigError(
        "No repository to probe. "
        "Set GITHUB_EVENT_PATH or GITHUB_REPOSITORY, or pass --owner and --repo."
    )


# =============================================================================
# Logging Configuration
# =============================================================================

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

_logging_initialized = False


def setup_logging(command_name: str = "review-probe", logs_dir: Optional[Path] = None) -> logging.Logger:
    """Set up logging to a rotating file plus errors on stderr.

    Args:
        command_name: Name of the command being run (used in log filename)
        logs_dir: Override for the log directory (defaults to LOGS_DIR)

    Returns:
        Configured logger instance
    """
    global _logging_initialized

    logger = logging.getLogger("review_probe")

    # Only configure once
    if _logging_initialized:
        return logger

    logs_dir = Path(logs_dir) if logs_dir else LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Create log filename with time (HHMM format)
    time_str = datetime.now().strftime("%H%M")
    log_file = logs_dir / f"{command_name}_{time_str}.log"

    logger.setLevel(logging.DEBUG)

    # File handler with rotation (10MB max, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)

    # Also log errors to stderr (but don't duplicate Rich console output)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(stderr_handler)

    _logging_initialized = True
    logger.info(f"Logging initialized for command: {command_name}")

    return logger


def get_logger(name: str = "review_probe") -> logging.Logger:
    """Get a logger instance. Call setup_logging() first."""
    return logging.getLogger(f"review_probe.{name}" if name != "review_probe" else "review_probe")
