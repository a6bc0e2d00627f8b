"""MCP resource definitions for the family highlights server."""

import io

from .core import _build_highlights
from .rendering import write_highlights


def _highlights_text(date_str: str | None) -> str:
    highlights = _build_highlights(date_str)
    if not highlights:
        return "Family data unavailable"
    out = io.StringIO()
    write_highlights(highlights, out)
    return out.getvalue()


def register_resources(mcp):
    """Register all MCP resources with the server."""

    @mcp.resource("highlights://today")
    def resource_today() -> str:
        """Get today's and tomorrow's family events as text."""
        return _highlights_text(None)

    @mcp.resource("highlights://date/{iso_date}")
    def resource_date(iso_date: str) -> str:
        """Get family events for a given date and the day after it."""
        return _highlights_text(iso_date)
