#!/usr/bin/env python
"""
logging_helper.py – one-call setup: stderr + optional file.

Usage:
    from pagesort.utils.logging_helper import get_logger
    log = get_logger()                  # derives name from caller's file
    log.info("It works")

stdout is reserved for sorted output, so console logging goes to stderr.
Set PAGESORT_LOG_DIR (or pass log_dir) to also write logs/<name>.log.
"""

from __future__ import annotations
import inspect, logging, sys, os
from pathlib import Path

DEF_FMT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"

class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    # Loggers are created at import time, before pytest (or a caller) swaps
    # sys.stderr; looking it up on every emit keeps records in the capture.
    # StreamHandler.__init__ and setStream assign self.stream, so the
    # setter ignores those writes.

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass

def get_logger(level: int = logging.INFO,
               log_dir: str | Path | None = None) -> logging.Logger:
    """
    Create (or return existing) logger whose name is the caller's module
    (e.g. 'engine'). Echoes to stderr, and to <log_dir>/<name>.log when a
    log directory is configured.
    """
    # ── derive name from caller ───────────────────────────────────────────
    caller = inspect.stack()[1]
    module = inspect.getmodule(caller[0])
    if module and module.__name__ != "__main__":
        name = module.__name__.split(".")[-1]
    else:
        # called as a script: use the file-stem (e.g., smart_sort)
        name = os.path.splitext(os.path.basename(caller.filename))[0]

    logger = logging.getLogger(f"pagesort.{name}")
    if logger.handlers:                 # already initialised
        return logger

    logger.setLevel(level)

    # console handler
    ch = _StderrHandler()
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(ch)

    # file handler
    log_dir = log_dir or os.environ.get("PAGESORT_LOG_DIR")
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(Path(log_dir) / f"{name}.log", encoding="utf-8")
        fh.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Apply *level* to every pagesort logger created so far (e.g. --verbose)."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("pagesort.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
