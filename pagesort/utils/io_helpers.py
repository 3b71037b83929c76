#!/usr/bin/env python
"""
io_helpers.py – tiny utilities for BOM-safe UTF-8 reading / writing.

Label files are read and written byte-faithfully: nothing here normalises
or repairs text, because a sorted list must contain exactly the labels it
was given. Use text_processing.repair_labels for opt-in mojibake fixes.
"""

from pathlib import Path
import sys, os
from typing import Tuple

BOM = b"\xef\xbb\xbf"

# ── public API ─────────────────────────────────────────────────────────────
def read_utf8_with_bom(path: Path) -> Tuple[str, bool]:
    """
    Return (text, had_bom) for a UTF-8 file.
    The BOM is stripped from the text; pass had_bom back to write_utf8 so a
    rewritten file keeps it.
    """
    raw = Path(path).read_bytes()
    had_bom = raw.startswith(BOM)
    if had_bom:
        raw = raw[len(BOM):]
    return raw.decode("utf-8"), had_bom

def read_utf8(path: Path) -> str:
    """
    Return file contents as str, decoded UTF-8, stripping BOM if present.
    Uses strict error-handling so encoding issues surface early.
    """
    return read_utf8_with_bom(path)[0]

def read_stdin() -> str:
    """Read all of stdin as UTF-8 text, dropping a leading BOM."""
    text = sys.stdin.read()
    return text[1:] if text.startswith("\ufeff") else text

def write_utf8(path: Path, text: str, bom: bool = False) -> None:
    """Write text verbatim as UTF-8 (optionally BOM-prefixed), creating parent folders."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes((BOM if bom else b"") + text.encode("utf-8"))

def ensure_utf8_windows() -> None:
    """Force UTF-8 on Windows terminals so emoji headers are readable."""
    if sys.platform == "win32":
        for stream in (sys.stdout, sys.stderr):
            if stream.encoding != "utf-8":
                stream.reconfigure(encoding="utf-8")
        os.environ["PYTHONIOENCODING"] = "utf-8"
