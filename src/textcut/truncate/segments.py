"""Splitting of mixed text/markup input into text and tag runs."""

from __future__ import annotations

from dataclasses import dataclass

from textcut.truncate.boundary import collapse_whitespace

NBSP_ENTITY = "&nbsp;"


@dataclass(frozen=True, slots=True)
class Segment:
    """A text run or an opaque tag run.

    ``preceding_text_chars`` is the number of text characters held by all
    text segments before this one; it is always 0 for tags.
    """

    is_text: bool
    content: str
    preceding_text_chars: int = 0

    @property
    def length(self) -> int:
        return len(self.content)


def normalize_text_run(text: str) -> str:
    return collapse_whitespace(text.replace(NBSP_ENTITY, " "))


def split_markup(html: str, max_chars: int) -> tuple[list[Segment], int]:
    """Segment ``html`` until more than ``max_chars`` text characters are seen.

    Returns the segments and the number of text characters they hold. Scanning
    stops after the tag that follows the text exceeding the limit; anything past
    that point is not returned. An unterminated ``<`` makes the remaining tail a
    single text segment.
    """

    segments: list[Segment] = []
    chars_count = 0
    index = 0

    while True:
        open_pos = html.find("<", index)
        close_pos = html.find(">", open_pos + 1) if open_pos != -1 else -1
        if close_pos == -1:
            tail = normalize_text_run(html[index:])
            if tail:
                segments.append(Segment(True, tail, chars_count))
                chars_count += len(tail)
            break

        text = normalize_text_run(html[index:open_pos])
        tag = html[open_pos : close_pos + 1]
        if text:
            segments.append(Segment(True, text, chars_count))
        segments.append(Segment(False, tag))
        chars_count += len(text)
        if chars_count > max_chars:
            break
        index = close_pos + 1

    return segments, chars_count


__all__ = ["Segment", "split_markup", "normalize_text_run", "NBSP_ENTITY"]
