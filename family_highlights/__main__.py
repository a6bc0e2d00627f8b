"""Entry point for running the highlights server as a module.

Usage:
    python -m family_highlights --data-source /path/to/family-data.json
    family-highlights --data-source https://example.com/family-data.json --print
"""

import argparse
import logging
import os
import sys


def main():
    """Main entry point for the family highlights server."""
    parser = argparse.ArgumentParser(
        description="Family History Highlights - births, deaths and marriages on this day",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  family-highlights --data-source ~/family-data.json
  family-highlights -s https://example.com/family-data.json --print
  family-highlights -s ~/family-data.json --date 2024-02-14 --html

Environment variables:
  HIGHLIGHTS_DATA_SOURCE      URL or path of the family-data JSON document
  HIGHLIGHTS_REQUEST_TIMEOUT  HTTP timeout in seconds (default: 10)
  HIGHLIGHTS_LOG_LEVEL        Logging level (default: WARNING)
""",
    )
    parser.add_argument(
        "--data-source",
        "-s",
        metavar="PATH_OR_URL",
        help="Family-data JSON file or URL (or set HIGHLIGHTS_DATA_SOURCE env var)",
    )
    parser.add_argument(
        "--date",
        "-d",
        metavar="YYYY-MM-DD",
        help="Reference date for --print/--html (default: today)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--print",
        action="store_true",
        dest="print_text",
        help="Print today's and tomorrow's events and exit instead of serving MCP",
    )
    output.add_argument(
        "--html",
        action="store_true",
        help="Print the HTML highlight box and exit instead of serving MCP",
    )
    args = parser.parse_args()

    # CLI args override env vars
    if args.data_source:
        os.environ["HIGHLIGHTS_DATA_SOURCE"] = args.data_source

    # Import and initialize AFTER setting env vars
    from . import initialize, mcp
    from .state import _resolve_log_level, load_env

    load_env()
    try:
        logging.basicConfig(level=_resolve_log_level())
    except ValueError as e:
        parser.error(str(e))

    one_shot = args.print_text or args.html
    # One-shot output loads the dataset itself when building highlights
    try:
        initialize(load=not one_shot)
    except ValueError as e:
        parser.error(str(e))

    if one_shot:
        from .core import _build_highlights
        from .rendering import render_highlight_box, write_highlights

        try:
            highlights = _build_highlights(args.date)
        except ValueError as e:
            parser.error(str(e))
        if highlights is None:
            print("Family data could not be loaded", file=sys.stderr)
            sys.exit(1)

        if args.html:
            sys.stdout.write(render_highlight_box(highlights))
        else:
            write_highlights(highlights, sys.stdout)
        return

    mcp.run()


if __name__ == "__main__":
    main()
