"""HTML detection heuristic.

This is not a parser: any ``<`` followed later on the same line by ``>``
counts as markup, so literal angle brackets in prose are reported as HTML.
"""

from __future__ import annotations

import re

_TAG_LIKE = re.compile(r"<.+>")


def looks_like_html(text: str) -> bool:
    return _TAG_LIKE.search(text) is not None


__all__ = ["looks_like_html"]
