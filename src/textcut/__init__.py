"""Truncate plain text or HTML to a character budget without breaking tags."""

from __future__ import annotations

from textcut.config import Settings, TruncationConfig, load_settings, write_config
from textcut.truncator import Truncator, resolve_html_mode, truncate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Settings",
    "TruncationConfig",
    "Truncator",
    "load_settings",
    "resolve_html_mode",
    "truncate",
    "write_config",
]
