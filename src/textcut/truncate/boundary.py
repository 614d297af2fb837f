"""Word-boundary trimming shared by the plain and markup truncators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Stripped from the right edge before an ellipsis is appended.
TRIM_CHARS = ",.:;?!+\"'-–()[]{}<>=$§ "

_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


class BoundaryOutcome(str, Enum):
    NO_SPACE = "no_space"
    EMPTY = "empty"
    CUT = "cut"


@dataclass(frozen=True, slots=True)
class BoundaryCut:
    outcome: BoundaryOutcome
    text: str


def collapse_whitespace(text: str) -> str:
    """Replace every run of ASCII whitespace with a single space."""

    return _WHITESPACE_RUN.sub(" ", text)


def strip_trailing(text: str, trim_chars: str = TRIM_CHARS) -> str:
    return text.rstrip(trim_chars)


def trim_to_boundary(prefix: str, ellipsis: str, trim_chars: str = TRIM_CHARS) -> BoundaryCut:
    """Cut ``prefix`` at its last space and append ``ellipsis``.

    The position of the last space is taken from the untrimmed prefix; trailing
    punctuation is stripped first, so the cut never lands past the trimmed end.

    - ``NO_SPACE``: the prefix has no word boundary; ``text`` is the prefix as is.
    - ``EMPTY``: stripping removed everything; ``text`` is the bare ellipsis.
    - ``CUT``: ``text`` is the head up to the last space plus the ellipsis.
    """

    last_space = prefix.rfind(" ")
    if last_space == -1:
        return BoundaryCut(BoundaryOutcome.NO_SPACE, prefix)

    trimmed = strip_trailing(prefix, trim_chars)
    if not trimmed:
        return BoundaryCut(BoundaryOutcome.EMPTY, ellipsis)
    return BoundaryCut(BoundaryOutcome.CUT, trimmed[:last_space] + ellipsis)


__all__ = [
    "TRIM_CHARS",
    "BoundaryOutcome",
    "BoundaryCut",
    "collapse_whitespace",
    "strip_trailing",
    "trim_to_boundary",
]
