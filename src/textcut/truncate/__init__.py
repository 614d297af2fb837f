"""Truncation algorithms for plain text and HTML-tagged text."""

from __future__ import annotations

from textcut.truncate.boundary import (
    TRIM_CHARS,
    BoundaryCut,
    BoundaryOutcome,
    collapse_whitespace,
    strip_trailing,
    trim_to_boundary,
)
from textcut.truncate.detect import looks_like_html
from textcut.truncate.markup import DEFAULT_HTML_ELLIPSIS, place_ellipsis, truncate_html
from textcut.truncate.plain import DEFAULT_TEXT_ELLIPSIS, truncate_text
from textcut.truncate.segments import Segment, split_markup

__all__ = [
    "TRIM_CHARS",
    "DEFAULT_HTML_ELLIPSIS",
    "DEFAULT_TEXT_ELLIPSIS",
    "BoundaryCut",
    "BoundaryOutcome",
    "Segment",
    "collapse_whitespace",
    "looks_like_html",
    "place_ellipsis",
    "split_markup",
    "strip_trailing",
    "trim_to_boundary",
    "truncate_html",
    "truncate_text",
]
