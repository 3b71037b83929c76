#!/usr/bin/env python
"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

_MARKERS = (".git", "pyproject.toml")


def find_root(start: Path | None = None) -> Path:
    """Return the project root.

    ``PAGESORT_ROOT`` wins when set. Otherwise walk up from *start* (the
    working directory by default) looking for a marker file, and fall back to
    *start* itself so an installed CLI works from any folder.
    """
    env_root = os.environ.get("PAGESORT_ROOT")
    if env_root:
        return Path(env_root).resolve()

    start = Path(start or Path.cwd()).resolve()
    current = start
    while current.parent != current:
        if any((current / marker).exists() for marker in _MARKERS):
            return current
        current = current.parent
    return start


ROOT           = find_root()
CONFIG_DIR     = ROOT / "config"
DEFAULT_CONFIG = CONFIG_DIR / "pagesort.yaml"
