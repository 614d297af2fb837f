"""Truncation of flat text without markup."""

from __future__ import annotations

from textcut.truncate.boundary import TRIM_CHARS, collapse_whitespace, trim_to_boundary

DEFAULT_TEXT_ELLIPSIS = "..."


def truncate_text(
    text: str, max_chars: int, ellipsis: str = DEFAULT_TEXT_ELLIPSIS, trim_chars: str = TRIM_CHARS
) -> str:
    """Shorten ``text`` to ``max_chars`` characters at a word boundary.

    Text that already fits is returned untouched. Otherwise whitespace runs are
    collapsed before cutting. When the kept prefix has no space to cut at, it is
    returned without an ellipsis.
    """

    if len(text) <= max_chars:
        return text

    prefix = collapse_whitespace(text)[: max(max_chars, 0)]
    return trim_to_boundary(prefix, ellipsis, trim_chars).text


__all__ = ["truncate_text", "DEFAULT_TEXT_ELLIPSIS"]
