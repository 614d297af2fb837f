"""Mode resolution and the public truncation entry points."""

from __future__ import annotations

import logging

from textcut.config import Settings, TruncationConfig
from textcut.truncate.detect import looks_like_html
from textcut.truncate.markup import truncate_html
from textcut.truncate.plain import truncate_text

_LOGGER = logging.getLogger(__name__)

_DEFAULT_CONFIG = TruncationConfig()


def resolve_html_mode(text: str, is_html: bool | None, config: TruncationConfig) -> bool:
    """Pick HTML or text mode: explicit flag, then configured mode, then detection."""

    if is_html is not None:
        return is_html
    if config.html_mode is not None:
        return config.html_mode
    return looks_like_html(text)


class Truncator:
    """Truncates text with a fixed configuration.

    Instances are immutable; the ``with_*`` methods return reconfigured copies,
    so a configured truncator can be built once and shared.
    """

    def __init__(self, config: TruncationConfig | None = None) -> None:
        self._config = config if config is not None else _DEFAULT_CONFIG

    @classmethod
    def from_settings(cls, settings: Settings) -> Truncator:
        return cls(settings.truncation)

    @property
    def config(self) -> TruncationConfig:
        return self._config

    def with_ellipsis(self, ellipsis: str, *, for_html: bool = True) -> Truncator:
        field = "ellipsis_html" if for_html else "ellipsis_text"
        return Truncator(self._config.model_copy(update={field: ellipsis}))

    def with_html_mode(self, html_mode: bool | None = True) -> Truncator:
        return Truncator(self._config.model_copy(update={"html_mode": html_mode}))

    def truncate(self, text: str, max_chars: int | None = None, is_html: bool | None = None) -> str:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

        limit = self._config.max_chars if max_chars is None else max_chars
        html = resolve_html_mode(text, is_html, self._config)
        ellipsis = self._config.ellipsis_for(html)
        _LOGGER.debug("truncating %d chars to %d in %s mode", len(text), limit, "html" if html else "text")

        if html:
            return truncate_html(text, limit, ellipsis, self._config.trim_chars)
        return truncate_text(text, limit, ellipsis, self._config.trim_chars)

    def __repr__(self) -> str:
        return f"Truncator({self._config!r})"


def truncate(
    text: str,
    max_chars: int | None = None,
    is_html: bool | None = None,
    *,
    config: TruncationConfig | None = None,
) -> str:
    """Truncate plain or HTML text to ``max_chars`` visible characters.

    ``max_chars=None`` uses ``config.max_chars`` (200 unless configured) and
    ``is_html=None`` falls back to ``config.html_mode`` and then to
    :func:`~textcut.truncate.detect.looks_like_html`.
    """

    return Truncator(config).truncate(text, max_chars, is_html)


__all__ = ["Truncator", "resolve_html_mode", "truncate"]
