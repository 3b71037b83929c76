"""
config.py - Sorter configuration

Settings come from a YAML mapping, e.g. ``config/pagesort.yaml``::

    sticky_breaks_segments: true
    collation: locale
    drop_blank: false

Lookup order: explicit path, ``$PAGESORT_CONFIG`` (``.env`` files are
honoured), ``<root>/config/pagesort.yaml``, built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from pagesort.utils import paths
from pagesort.utils.logging_helper import get_logger

log = get_logger()

COLLATIONS = ("locale", "codepoint")


class ConfigError(ValueError):
    """Raised for unreadable or invalid sorter configuration."""


@dataclass(frozen=True)
class SortConfig:
    """Knobs for the smart sort pipeline and the CLI around it."""
    sticky_breaks_segments: bool = True
    emoji_headers: bool = True
    caps_headers: bool = True
    group_children: bool = True
    collation: str = "locale"
    drop_blank: bool = False
    fix_text: bool = False

    def __post_init__(self) -> None:
        if self.collation not in COLLATIONS:
            raise ConfigError(
                f"Unknown collation {self.collation!r}; expected one of {', '.join(COLLATIONS)}"
            )
        for f in fields(self):
            if f.type in ("bool", bool) and not isinstance(getattr(self, f.name), bool):
                raise ConfigError(f"{f.name} must be true or false, got {getattr(self, f.name)!r}")

    def with_overrides(self, **overrides: Any) -> "SortConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def config_from_mapping(data: Optional[Dict[str, Any]]) -> SortConfig:
    """Build a SortConfig from a parsed YAML mapping."""
    if data is None:
        return SortConfig()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping")
    known = {f.name for f in fields(SortConfig)}
    unknown = sorted(map(str, set(data) - known))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
    return SortConfig(**data)


def resolve_config_path(path: str | Path | None = None) -> Optional[Path]:
    """Return the config file to use, or None for built-in defaults."""
    if path:
        return Path(path)
    load_dotenv()
    env_path = os.getenv("PAGESORT_CONFIG")
    if env_path:
        return Path(env_path)
    if paths.DEFAULT_CONFIG.exists():
        return paths.DEFAULT_CONFIG
    return None


def load_config(path: str | Path | None = None) -> SortConfig:
    """Load sorter settings from YAML (see module docstring for lookup)."""
    config_path = resolve_config_path(path)
    if config_path is None:
        log.debug("No config file found, using defaults")
        return SortConfig()
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    config = config_from_mapping(data)
    log.debug(f"Loaded config from {config_path}: {config}")
    return config
