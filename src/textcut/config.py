"""Configuration models and loading for textcut.

Settings are resolved once (overrides > environment > TOML file > defaults)
and handed to the truncation layer as immutable values.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textcut.paths import default_config_path
from textcut.truncate.boundary import TRIM_CHARS
from textcut.truncate.markup import DEFAULT_HTML_ELLIPSIS
from textcut.truncate.plain import DEFAULT_TEXT_ELLIPSIS

DEFAULT_MAX_CHARS = 200


class ConfigError(ValueError):
    """Raised when a config file or environment value cannot be used."""


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class TruncationConfig(BaseModel):
    """Defaults applied by a Truncator when a call leaves them unset."""

    model_config = ConfigDict(frozen=True, validate_default=True, extra="forbid")

    max_chars: int = Field(default=DEFAULT_MAX_CHARS, gt=0, strict=True)
    ellipsis_html: str = DEFAULT_HTML_ELLIPSIS
    ellipsis_text: str = DEFAULT_TEXT_ELLIPSIS
    html_mode: bool | None = None
    trim_chars: str = TRIM_CHARS

    def ellipsis_for(self, is_html: bool) -> str:
        return self.ellipsis_html if is_html else self.ellipsis_text


class Settings(BaseModel):
    """Resolved textcut settings."""

    model_config = ConfigDict(frozen=True, validate_default=True, extra="forbid")

    truncation: TruncationConfig = Field(default_factory=TruncationConfig)
    log_level: LogLevel = LogLevel.INFO

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


_ENV_KEYS = {
    "max_chars": "TEXTCUT_MAX_CHARS",
    "ellipsis_html": "TEXTCUT_ELLIPSIS_HTML",
    "ellipsis_text": "TEXTCUT_ELLIPSIS_TEXT",
    "html_mode": "TEXTCUT_HTML_MODE",
    "log_level": "TEXTCUT_LOG_LEVEL",
}

_TRUE_VALUES = {"1", "true", "yes", "on", "html"}
_FALSE_VALUES = {"0", "false", "no", "off", "text"}
_AUTO_VALUES = {"", "auto", "none"}


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
    config_path: Path | str | None = None,
) -> Settings:
    env = os.environ if env is None else env
    overrides = overrides or {}
    path = Path(config_path) if config_path else default_config_path()

    config_data: dict[str, Any] = {}
    if path.exists():
        config_data = _read_toml(path)

    defaults = Settings()

    max_chars = _first_value(
        overrides.get("max_chars"),
        _parse_int(env.get(_ENV_KEYS["max_chars"]), _ENV_KEYS["max_chars"]),
        _get_config_value(config_data, "truncate", "max_chars"),
        defaults.truncation.max_chars,
    )
    ellipsis_html = _first_value(
        overrides.get("ellipsis_html"),
        env.get(_ENV_KEYS["ellipsis_html"]),
        _get_config_value(config_data, "truncate", "ellipsis_html"),
        defaults.truncation.ellipsis_html,
    )
    ellipsis_text = _first_value(
        overrides.get("ellipsis_text"),
        env.get(_ENV_KEYS["ellipsis_text"]),
        _get_config_value(config_data, "truncate", "ellipsis_text"),
        defaults.truncation.ellipsis_text,
    )

    # html_mode distinguishes "not set" from an explicit auto-detect request
    if "html_mode" in overrides:
        html_mode = _parse_mode(overrides["html_mode"], "html_mode")
    elif _ENV_KEYS["html_mode"] in env:
        html_mode = _parse_mode(env[_ENV_KEYS["html_mode"]], _ENV_KEYS["html_mode"])
    else:
        html_mode = _parse_mode(_get_config_value(config_data, "truncate", "html_mode"), "truncate.html_mode")

    log_level = _first_value(
        _clean_str(overrides.get("log_level")),
        _clean_str(env.get(_ENV_KEYS["log_level"])),
        _clean_str(_get_config_value(config_data, "logging", "log_level")),
        defaults.log_level,
    )

    return Settings(
        truncation=TruncationConfig(
            max_chars=max_chars,
            ellipsis_html=ellipsis_html,
            ellipsis_text=ellipsis_text,
            html_mode=html_mode,
        ),
        log_level=log_level,
    )


def write_config(settings: Settings, config_path: Path | str | None = None) -> Path:
    path = Path(config_path) if config_path else default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    truncation = settings.truncation
    sections: list[str] = []
    _append_section(
        sections,
        "truncate",
        {
            "max_chars": truncation.max_chars,
            "ellipsis_html": truncation.ellipsis_html,
            "ellipsis_text": truncation.ellipsis_text,
            "html_mode": truncation.html_mode,
        },
    )
    _append_section(sections, "logging", {"log_level": settings.log_level})

    content = "\n\n".join(filter(None, sections)) + "\n"
    path.write_text(content, encoding="utf-8")
    return path


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file {path}: {exc}") from exc


def _get_config_value(config: Mapping[str, Any], section: str, key: str) -> Any:
    section_data = config.get(section)
    if not isinstance(section_data, dict):
        return None
    return section_data.get(key)


def _clean_str(value: Any) -> Any:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    return value


def _first_value(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _parse_int(value: str | None, source: str) -> int | None:
    value = _clean_str(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{source} must be an integer, got {value!r}") from exc


def _parse_mode(value: Any, source: str) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        if lowered in _AUTO_VALUES:
            return None
    raise ConfigError(f"{source} must be true, false or auto, got {value!r}")


_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _escape_toml_string(value: str) -> str:
    """Escape ``value`` for a TOML basic string."""

    escaped: list[str] = []
    for char in value:
        if char in _TOML_ESCAPES:
            escaped.append(_TOML_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\u{ord(char):04X}")
        else:
            escaped.append(char)
    return "".join(escaped)


def _append_section(parts: list[str], name: str, values: Mapping[str, Any]) -> None:
    filtered = {k: v for k, v in values.items() if v is not None}
    if not filtered:
        return
    lines = [f"[{name}]"]
    for key, val in filtered.items():
        if isinstance(val, Enum):
            lines.append(f'{key} = "{val.value}"')
        elif isinstance(val, bool):
            lines.append(f"{key} = {'true' if val else 'false'}")
        elif isinstance(val, str):
            lines.append(f'{key} = "{_escape_toml_string(val)}"')
        else:
            lines.append(f"{key} = {val}")
    parts.append("\n".join(lines))


__all__ = [
    "ConfigError",
    "DEFAULT_MAX_CHARS",
    "LogLevel",
    "Settings",
    "TruncationConfig",
    "load_settings",
    "write_config",
]
