"""Common path utilities for textcut."""

from __future__ import annotations

import os
from pathlib import Path


def get_textcut_home() -> Path:
    """Return the base textcut directory, honoring TEXTCUT_HOME if set."""

    env_path = os.environ.get("TEXTCUT_HOME")
    return Path(env_path).expanduser() if env_path else Path.home() / ".textcut"


def default_config_path() -> Path:
    return get_textcut_home() / "config.toml"


__all__ = ["get_textcut_home", "default_config_path"]
