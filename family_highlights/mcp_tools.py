"""MCP tool definitions for the family highlights server."""

from .core import _get_highlights, _get_highlights_html, _parse_date


def register_tools(mcp):
    """Register all MCP tools with the server."""

    # ============== HIGHLIGHT TOOLS (2) ==============

    @mcp.tool()
    def get_highlights(date: str | None = None, refresh: bool = False) -> dict | None:
        """
        Get family events that happened on this day and on the next day.

        Matches exact birth, death and marriage dates by month and day,
        ignoring the year. Approximate dates ("Abt. 1900"), partial dates
        ("May 1892") and bare years are never matched.

        Args:
            date: Reference date as YYYY-MM-DD (default: today's local date)
            refresh: Re-fetch the family data before collecting

        Returns:
            Dictionary with today_date, tomorrow_date, and the today/tomorrow
            sentence lists, or None if the family data could not be loaded

        Examples:
            get_highlights()  # Events for today and tomorrow
            get_highlights("2024-02-14")  # Events for Feb 14 and Feb 15
        """
        return _get_highlights(date, refresh)

    @mcp.tool()
    def get_highlights_html(date: str | None = None, refresh: bool = False) -> str | None:
        """
        Render the "on this day" highlight box as an HTML fragment.

        Each sentence is HTML-escaped. Empty lists show "[No recorded Event]".

        Args:
            date: Reference date as YYYY-MM-DD (default: today's local date)
            refresh: Re-fetch the family data before rendering

        Returns:
            HTML section, or None if the family data could not be loaded
        """
        return _get_highlights_html(date, refresh)

    # ============== DATE TOOLS (1) ==============

    @mcp.tool()
    def parse_date(text: str) -> dict | None:
        """
        Parse a genealogy date string if it names an exact calendar day.

        Only "<day> <month> <year>" forms such as "14 Feb 1825" or
        "1 September 1900" are accepted.

        Args:
            text: Raw date string from a family record

        Returns:
            Dictionary with month, day, year and the "MM-DD" match key,
            or None if the date is approximate, partial or unparseable
        """
        return _parse_date(text)
