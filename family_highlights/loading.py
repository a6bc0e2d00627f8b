"""Fetching and decoding the family-data document.

A failed load is reported as None so that callers simply skip rendering.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from . import state
from .constants import DEFAULT_REQUEST_TIMEOUT
from .telemetry import get_tracer, record_load

logger = logging.getLogger(__name__)

_HEADERS = {
    "Cache-Control": "no-store",
    "User-Agent": "Family-Highlights/1.0",
}


def _fetch_url(url: str, timeout: float) -> Any:
    response = requests.get(url, headers=_HEADERS, timeout=timeout)
    response.raise_for_status()
    return response.json()


def _read_file(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def fetch_dataset(source: str | Path, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> Any | None:
    """Fetch and decode a family-data document from a URL or local file.

    Args:
        source: http(s) URL or filesystem path
        timeout: HTTP timeout in seconds (ignored for files)

    Returns:
        The decoded JSON document, or None if it could not be loaded
    """
    is_url = state.is_url(source)
    with get_tracer().start_as_current_span("fetch_dataset") as span:
        try:
            if is_url:
                data = _fetch_url(str(source), timeout)
            else:
                data = _read_file(Path(source))
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch family data from {source}: {e}")
            record_load(span, source, is_url, error=e)
            return None
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read family data from {source}: {e}")
            record_load(span, source, is_url, error=e)
            return None

        record_load(span, source, is_url)
        logger.info(f"Loaded family data from {source}")
        return data


def load_dataset() -> Any | None:
    """Load the configured dataset into state.

    Requires configure() to be called first to set state.DATA_SOURCE.
    The previously loaded dataset is kept if the new load fails.
    """
    if state.DATA_SOURCE is None:
        raise RuntimeError("configure() must be called before load_dataset()")

    data = fetch_dataset(state.DATA_SOURCE, timeout=state.REQUEST_TIMEOUT)
    if data is not None:
        state.dataset = data
    return data
