import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_env() -> None:
    """Load a .env file before any environment lookups.

    ``TSPERF_DOTENV_PATH`` selects an explicit file; otherwise python-dotenv's
    default search is used. Variables already set in the process win.
    """
    dotenv_path = os.getenv("TSPERF_DOTENV_PATH", "").strip()
    if not dotenv_path:
        load_dotenv()
        return

    path = Path(dotenv_path).expanduser()
    if path.exists():
        load_dotenv(path)
    else:
        logger.warning("TSPERF_DOTENV_PATH does not exist: %s", dotenv_path)
        load_dotenv()


def is_true_literal(value: str | None) -> bool:
    """Return True only for a case-insensitive ``"TRUE"``; unset is False."""
    return (value or "FALSE").upper() == "TRUE"


def check_non_empty(value: str | None, message: str) -> str:
    if not value:
        raise ConfigurationError(message)
    return value


def get_non_empty_env(name: str) -> str:
    """Read an environment variable that must be set to a non-empty value.

    Raises:
        ConfigurationError: If the variable is unset or empty.
    """
    return check_non_empty(os.getenv(name), f"Expected {name} environment variable to be set")
