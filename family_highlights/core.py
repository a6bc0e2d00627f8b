"""Core request functions for the highlights server."""

from datetime import date

from . import state
from .dates import parse_exact_date
from .events import collect_highlights
from .loading import load_dataset
from .models import Highlights
from .rendering import render_highlight_box
from .telemetry import get_tracer, record_highlights


def _resolve_reference_date(date_str: str | None = None) -> date:
    """Parse an ISO date (YYYY-MM-DD), defaulting to today's local date.

    Raises:
        ValueError: If date_str is not a valid ISO calendar date.
    """
    if not date_str or not date_str.strip():
        return date.today()
    try:
        return date.fromisoformat(date_str.strip())
    except ValueError:
        raise ValueError(f"Invalid date {date_str!r}, expected YYYY-MM-DD") from None


def _current_dataset(refresh: bool = False):
    if refresh or state.dataset is None:
        load_dataset()
    return state.dataset


def _build_highlights(date_str: str | None = None, refresh: bool = False) -> Highlights | None:
    """Collect highlights for a reference date, or None when no data is available."""
    reference = _resolve_reference_date(date_str)
    dataset = _current_dataset(refresh)
    if dataset is None:
        return None

    with get_tracer().start_as_current_span("collect_highlights") as span:
        highlights = collect_highlights(dataset, reference)
        record_highlights(span, highlights)
    return highlights


def _get_highlights(date_str: str | None = None, refresh: bool = False) -> dict | None:
    highlights = _build_highlights(date_str, refresh)
    return highlights.to_dict() if highlights else None


def _get_highlights_html(date_str: str | None = None, refresh: bool = False) -> str | None:
    highlights = _build_highlights(date_str, refresh)
    return render_highlight_box(highlights) if highlights else None


def _parse_date(text: str) -> dict | None:
    parsed = parse_exact_date(text)
    if not parsed:
        return None

    result = parsed.to_dict()
    result["key"] = parsed.key
    return result
