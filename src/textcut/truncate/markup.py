"""Truncation of text with HTML tags: only visible text counts, tags stay whole."""

from __future__ import annotations

import logging

from textcut.truncate.boundary import TRIM_CHARS, BoundaryOutcome, trim_to_boundary
from textcut.truncate.segments import Segment, split_markup

DEFAULT_HTML_ELLIPSIS = "&hellip;"

_LOGGER = logging.getLogger(__name__)


def truncate_html(
    html: str, max_chars: int, ellipsis: str = DEFAULT_HTML_ELLIPSIS, trim_chars: str = TRIM_CHARS
) -> str:
    """Truncate the text content of ``html`` to ``max_chars`` characters.

    Tags are neither counted nor split. Input whose text fits is returned
    unchanged, including its original whitespace.
    """

    max_chars = max(max_chars, 0)
    segments, chars_count = split_markup(html, max_chars)
    if chars_count <= max_chars:
        return html

    kept = place_ellipsis(segments, max_chars, ellipsis, trim_chars)
    return "".join(segment.content for segment in kept)


def place_ellipsis(
    segments: list[Segment], max_chars: int, ellipsis: str, trim_chars: str = TRIM_CHARS
) -> list[Segment]:
    """Return a new segment list with the last viable text run cut and marked.

    Text runs are visited from the end. A run with no word boundary inside its
    budget, or one that is nothing but trim characters, is dropped and the walk
    moves to the previous run. Tags are always kept.
    """

    kept = list(segments)
    for idx in range(len(kept) - 1, -1, -1):
        segment = kept[idx]
        if not segment.is_text:
            continue

        budget = max(max_chars - segment.preceding_text_chars, 0)
        cut = trim_to_boundary(segment.content[:budget], ellipsis, trim_chars)
        if cut.outcome is BoundaryOutcome.CUT:
            kept[idx] = Segment(True, cut.text, segment.preceding_text_chars)
            return kept

        _LOGGER.debug("dropping text run at %d (%s)", segment.preceding_text_chars, cut.outcome.value)
        del kept[idx]

    return kept


__all__ = ["truncate_html", "place_ellipsis", "DEFAULT_HTML_ELLIPSIS"]
