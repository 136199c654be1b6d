"""Configuration for transchoice.

Configuration is an immutable :class:`TransChoiceConfig`. Values come from,
in increasing priority:

1. Built-in defaults
2. A configuration file (YAML, JSON or TOML, detected by suffix)
3. ``TRANSCHOICE_*`` environment variables

Example file (``transchoice.yaml``)::

    transchoice:
      default_locale: ru
      apply_replacements: true
      log_level: INFO

Usage:
    >>> from transchoice.config import load_config
    >>> config = load_config("transchoice.yaml")
    >>> config.default_locale
    'ru'
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from transchoice.exceptions import ConfigError, ConfigSourceError

logger = logging.getLogger(__name__)

__all__ = [
    "TransChoiceConfig",
    "DEFAULT_LOCALE",
    "ENV_PREFIX",
    "load_config",
]

DEFAULT_LOCALE = "en"
ENV_PREFIX = "TRANSCHOICE_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {value!r}")


@dataclass(frozen=True)
class TransChoiceConfig:
    """Process-wide settings for message resolution.

    Attributes:
        default_locale: Locale used when a call passes none
        apply_replacements: Substitute placeholders in every resolved message
        log_level: Log level used by the command line
    """

    default_locale: str = DEFAULT_LOCALE
    apply_replacements: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            raise ConfigError(f"default_locale must be a non-empty string, got {self.default_locale!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"Unknown log_level {self.log_level!r}. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", self.log_level.upper())
        object.__setattr__(
            self, "apply_replacements", _parse_bool("apply_replacements", self.apply_replacements)
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransChoiceConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_env(cls, base: "TransChoiceConfig | None" = None) -> "TransChoiceConfig":
        """Overlay ``TRANSCHOICE_*`` environment variables on ``base``."""
        base = base or cls()
        overrides: dict[str, Any] = {}
        for f in fields(cls):
            value = os.environ.get(ENV_PREFIX + f.name.upper())
            if value is not None and value != "":
                overrides[f.name] = value
        return replace(base, **overrides) if overrides else base

    @classmethod
    def from_file(cls, path: str | Path) -> "TransChoiceConfig":
        """Load configuration from a YAML, JSON or TOML file."""
        return cls.from_dict(_read_config_file(Path(path)))

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigSourceError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    try:
        content = path.read_text(encoding="utf-8")
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif suffix == ".json":
            data = json.loads(content)
        elif suffix == ".toml":
            data = tomllib.loads(content)
        else:
            raise ConfigSourceError(f"Unsupported file format: {suffix}")
    except (OSError, yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigSourceError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigSourceError(f"Configuration in {path} must be a mapping")

    # Allow settings to live under a "transchoice" section
    section = data.get("transchoice", data)
    if not isinstance(section, dict):
        raise ConfigSourceError(f"'transchoice' section in {path} must be a mapping")
    return section


def load_config(path: str | Path | None = None) -> TransChoiceConfig:
    """Load configuration from defaults, an optional file and the environment.

    Args:
        path: Optional configuration file

    Returns:
        The merged configuration

    Raises:
        ConfigSourceError: If the file cannot be read or parsed
        ConfigError: If a value is invalid
    """
    config = TransChoiceConfig.from_file(path) if path is not None else TransChoiceConfig()
    return TransChoiceConfig.from_env(config)
