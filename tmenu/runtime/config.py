"""Persistent JSON config and resolution of effective menu settings.

Stored values are read defensively: a malformed file or an invalid key falls
back to the built-in default. Values given explicitly on the command line are
validated strictly and raise ``ConfigError``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

from ..errors import ConfigError
from ..items.source import DEFAULT_DELIMITERS
from ..session import validate_limit
from ..ui_theme import available_theme_names

logger = logging.getLogger(__name__)

APP_NAME = "tmenu"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

ORIENTATIONS = ("horizontal", "vertical")
POSITIONS = ("top", "bottom")


@dataclass(frozen=True)
class MenuConfig:
    """Effective settings for one menu session."""

    limit: int = 10
    case_insensitive: bool = False
    delimiters: str = DEFAULT_DELIMITERS
    orientation: str = "horizontal"
    position: str = "top"
    prompt: str = ""
    theme: str = "default"
    # Fraction of the row width reserved for prompt and query in horizontal layout.
    search_margin: float = 0.2
    padding: int = 2


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError):
        logger.debug("ignoring unreadable config at %s", CONFIG_PATH, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


def _check_limit(value: object) -> int:
    return validate_limit(value)


def _check_case_insensitive(value: object) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"case_insensitive must be a boolean, got {value!r}")
    return value


def _check_delimiters(value: object) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError("delimiter set must be a non-empty string")
    return value


def _check_orientation(value: object) -> str:
    if value not in ORIENTATIONS:
        raise ConfigError(f"orientation must be one of {', '.join(ORIENTATIONS)}, got {value!r}")
    return str(value)


def _check_position(value: object) -> str:
    if value not in POSITIONS:
        raise ConfigError(f"position must be one of {', '.join(POSITIONS)}, got {value!r}")
    return str(value)


def _check_prompt(value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"prompt must be a string, got {value!r}")
    return value


def _check_theme(value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"theme must be a string, got {value!r}")
    candidate = value.strip().lower()
    if candidate not in available_theme_names():
        raise ConfigError(f"unknown theme {value!r} (available: {', '.join(available_theme_names())})")
    return candidate


def _check_search_margin(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value < 1:
        raise ConfigError(f"search_margin must be a number in [0, 1), got {value!r}")
    return float(value)


def _check_padding(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"padding must be a non-negative integer, got {value!r}")
    return value


_CHECKS = {
    "limit": _check_limit,
    "case_insensitive": _check_case_insensitive,
    "delimiters": _check_delimiters,
    "orientation": _check_orientation,
    "position": _check_position,
    "prompt": _check_prompt,
    "theme": _check_theme,
    "search_margin": _check_search_margin,
    "padding": _check_padding,
}


def _stored_values(stored: Mapping[str, object]) -> dict[str, object]:
    """Keep only stored keys that pass validation."""
    values: dict[str, object] = {}
    for key, check in _CHECKS.items():
        if key not in stored:
            continue
        try:
            values[key] = check(stored[key])
        except ConfigError as exc:
            logger.debug("ignoring stored %s: %s", key, exc)
    return values


def resolve_menu_config(
    overrides: Mapping[str, object] | None = None,
    stored: Mapping[str, object] | None = None,
) -> MenuConfig:
    """Merge defaults, stored config and explicit overrides into a ``MenuConfig``.

    ``None`` override values mean "not given". Invalid overrides raise
    ``ConfigError``; invalid stored values are dropped.
    """
    if stored is None:
        stored = load_config()
    known = {field.name for field in fields(MenuConfig)}
    config = replace(MenuConfig(), **_stored_values(stored))
    explicit: dict[str, object] = {}
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key not in known:
            raise ConfigError(f"unknown setting {key!r}")
        explicit[key] = _CHECKS[key](value)
    return replace(config, **explicit)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "MenuConfig",
    "ORIENTATIONS",
    "POSITIONS",
    "load_config",
    "resolve_menu_config",
]
