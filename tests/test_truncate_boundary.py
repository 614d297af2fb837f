from textcut.truncate.boundary import (
    TRIM_CHARS,
    BoundaryOutcome,
    collapse_whitespace,
    strip_trailing,
    trim_to_boundary,
)


def test_cut_at_last_space() -> None:
    cut = trim_to_boundary("Hello world", "...")
    assert cut.outcome is BoundaryOutcome.CUT
    assert cut.text == "Hello..."


def test_trailing_punctuation_removed_before_ellipsis() -> None:
    cut = trim_to_boundary("one two, ", "...")
    assert cut.outcome is BoundaryOutcome.CUT
    assert cut.text == "one two..."


def test_no_space_returns_prefix_without_ellipsis() -> None:
    cut = trim_to_boundary("nospace", "...")
    assert cut.outcome is BoundaryOutcome.NO_SPACE
    assert cut.text == "nospace"


def test_only_trim_chars_is_empty() -> None:
    cut = trim_to_boundary(" ,.-", "&hellip;")
    assert cut.outcome is BoundaryOutcome.EMPTY
    assert cut.text == "&hellip;"


def test_empty_prefix_has_no_boundary() -> None:
    cut = trim_to_boundary("", "...")
    assert cut.outcome is BoundaryOutcome.NO_SPACE
    assert cut.text == ""


def test_strip_trailing_handles_full_set() -> None:
    assert strip_trailing("word" + TRIM_CHARS) == "word"
    assert strip_trailing("word–§$)]") == "word"
    assert strip_trailing("(word") == "(word"


def test_strip_trailing_custom_chars() -> None:
    assert strip_trailing("word!!", "") == "word!!"
    assert strip_trailing("word!!", "!") == "word"


def test_collapse_whitespace_ascii_only() -> None:
    assert collapse_whitespace("a \t\n b  c") == "a b c"
    assert collapse_whitespace("a\xa0\xa0b") == "a\xa0\xa0b"
