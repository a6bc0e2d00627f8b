"""Global mutable state for configuration and the loaded dataset."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_DATA_SOURCE, DEFAULT_LOG_LEVEL, DEFAULT_REQUEST_TIMEOUT

# Configuration (set by configure() at startup)
DATA_SOURCE: str | Path | None = None
REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

# Last successfully loaded family-data document (populated by load_dataset)
dataset: Any = None


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _resolve_data_source() -> str | Path:
    """Get the dataset location from HIGHLIGHTS_DATA_SOURCE.

    URLs are returned unchanged; anything else is treated as a local path.
    """
    source = os.getenv("HIGHLIGHTS_DATA_SOURCE") or DEFAULT_DATA_SOURCE
    if is_url(source):
        return source
    return Path(source).expanduser().resolve()


def _resolve_request_timeout() -> float:
    """Get the HTTP timeout in seconds from HIGHLIGHTS_REQUEST_TIMEOUT.

    Raises:
        ValueError: If the value is not a positive number.
    """
    raw = os.getenv("HIGHLIGHTS_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"HIGHLIGHTS_REQUEST_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"HIGHLIGHTS_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return timeout


def _resolve_log_level() -> str:
    """Get the logging level name from HIGHLIGHTS_LOG_LEVEL.

    Raises:
        ValueError: If the value is not a standard logging level name.
    """
    level = (os.getenv("HIGHLIGHTS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"HIGHLIGHTS_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, "
            f"got {level!r}"
        )
    return level


def load_env() -> None:
    """Load .env from the working directory. Existing env vars win."""
    load_dotenv(find_dotenv(usecwd=True))


def configure() -> None:
    """Initialize configuration from environment. Called at startup.

    Loads .env file if present, then reads HIGHLIGHTS_* settings.
    Note: load_dotenv() does NOT override existing env vars by default.
    """
    global DATA_SOURCE, REQUEST_TIMEOUT
    load_env()
    DATA_SOURCE = _resolve_data_source()
    REQUEST_TIMEOUT = _resolve_request_timeout()
