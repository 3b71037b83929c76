"""
text_processing.py - Line-list helpers around the sorter

Converts between an editable block of text (one label per line) and the
label lists the sorter works on.
"""

import re
from typing import Iterable, List
from ftfy import fix_text

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split text into labels, one per line.

    Handles CRLF, CR and LF endings. A single trailing line break ends the
    last label instead of creating an extra blank one; blank lines in the
    middle are kept.

    Args:
        text: Text with one label per line

    Returns:
        List of labels (possibly empty)
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def detect_newline(text: str) -> str:
    """Return the first line break used in *text* ("\\n" when there is none)."""
    match = _LINE_BREAK.search(text)
    return match.group(0) if match else "\n"


def join_lines(labels: Iterable[str], trailing_newline: bool = True, newline: str = "\n") -> str:
    """Join labels back into a block of text using *newline* between them."""
    text = newline.join(labels)
    if trailing_newline and text:
        text += newline
    return text


def drop_blank_lines(labels: Iterable[str]) -> List[str]:
    """Remove empty and whitespace-only labels before applying an order."""
    return [label for label in labels if label.strip()]


def repair_labels(labels: Iterable[str]) -> List[str]:
    """Fix mojibake in labels (e.g. 'CafÃ©' -> 'Café') with ftfy.

    Each label is repaired on its own so line structure never changes.
    """
    return [fix_text(label) for label in labels]
