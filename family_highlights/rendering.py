"""HTML and plain-text rendering of highlight buckets."""

from typing import TextIO

from .constants import NO_EVENT_PLACEHOLDER
from .models import Highlights

_HTML_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
]


def escape_html(text) -> str:
    """Escape a value for safe inclusion in HTML text or attributes."""
    result = str(text)
    # "&" goes first so later entities are not double-escaped
    for char, entity in _HTML_ESCAPES:
        result = result.replace(char, entity)
    return result


def render_sentence_items(sentences: list[str]) -> list[str]:
    """Render one <li> per sentence, or a single placeholder item."""
    if not sentences:
        return [f'<li class="highlight-item">{escape_html(NO_EVENT_PLACEHOLDER)}</li>']
    return [f'<li class="highlight-item">{escape_html(s)}</li>' for s in sentences]


def render_highlight_box(highlights: Highlights) -> str:
    """Render the full highlight box.

    The box is always visible, even when both lists only hold the placeholder.
    """
    today_items = "\n".join(f"    {item}" for item in render_sentence_items(highlights.today))
    tomorrow_items = "\n".join(
        f"    {item}" for item in render_sentence_items(highlights.tomorrow)
    )
    return (
        '<section id="history-highlight">\n'
        f'  <h3>Today <time datetime="{highlights.reference_date.isoformat()}"></time></h3>\n'
        '  <ul id="history-today-list">\n'
        f"{today_items}\n"
        "  </ul>\n"
        f'  <h3>Tomorrow <time datetime="{highlights.next_date.isoformat()}"></time></h3>\n'
        '  <ul id="history-tomorrow-list">\n'
        f"{tomorrow_items}\n"
        "  </ul>\n"
        "</section>\n"
    )


def write_highlights(highlights: Highlights, out: TextIO) -> None:
    """Write a plain-text rendering of the highlights to out."""
    sections = [
        (f"Today ({highlights.reference_date.isoformat()})", highlights.today),
        (f"Tomorrow ({highlights.next_date.isoformat()})", highlights.tomorrow),
    ]
    for index, (heading, sentences) in enumerate(sections):
        if index:
            out.write("\n")
        out.write(f"{heading}\n")
        for sentence in sentences or [NO_EVENT_PLACEHOLDER]:
            out.write(f"- {sentence}\n")
