"""
segments.py - Split a label list into independently sorted segments

A breaker (divider or sticky header) closes the segment collected so far
and opens a new one with itself as the first element. Segments keep their
relative order in the output.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from pagesort.core.config import SortConfig
from .classify import is_breaker


def split_segments(labels: Iterable[str], config: Optional[SortConfig] = None) -> List[List[str]]:
    """Return the segments of *labels*; concatenated they equal the input.

    >>> split_segments(["B", "---", "a"])
    [['B'], ['---', 'a']]
    """
    config = config or SortConfig()
    segments: List[List[str]] = []
    current: List[str] = []

    for label in labels:
        if is_breaker(label, config) and current:
            segments.append(current)
            current = []
        current.append(label)

    if current:
        segments.append(current)
    return segments
