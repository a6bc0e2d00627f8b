"""Family History Highlights - FastMCP server for "on this day" family events.

This package reads a family-tree JSON document and reports the births, deaths
and marriage anniversaries that fall on today's date and on tomorrow's.

Usage:
    family-highlights --data-source /path/to/family-data.json
    HIGHLIGHTS_DATA_SOURCE=https://example.com/family-data.json python -m family_highlights
"""

from fastmcp import FastMCP

from .loading import load_dataset
from .mcp_resources import register_resources
from .mcp_tools import register_tools
from .state import configure
from .telemetry import initialize_tracing

# Initialize tracing FIRST (before creating server)
# This is a no-op if PHOENIX_ENABLED is not set to 'true'
initialize_tracing()

# Initialize FastMCP server
mcp = FastMCP("Family History Highlights")

# Register tools and resources
register_tools(mcp)
register_resources(mcp)

_initialized = False


def initialize(load: bool = True):
    """Initialize the server: configure from env vars and load the family data.

    Called automatically on first use or can be called explicitly.
    Safe to call multiple times. A failed load leaves no dataset in state.

    Args:
        load: Fetch the family data now; otherwise the first request fetches it
    """
    global _initialized
    if _initialized:
        return
    configure()
    if load:
        load_dataset()
    _initialized = True


__all__ = ["mcp", "initialize"]
