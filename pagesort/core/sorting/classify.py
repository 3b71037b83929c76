"""
classify.py - Label classification

A label is one of:
- a divider: only hyphens ("-", "--", "---"), a pure section separator
- a sticky header: starts with an emoji/symbol, or is ALL CAPS
- a regular label: everything else

Dividers and sticky headers are "breakers": they start a new segment.
Classification always looks at the trimmed label; the label text itself is
never changed.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pagesort.core.config import SortConfig

_DIVIDER = re.compile(r"^-+$")
# ©, ®, general punctuation through CJK symbols, and everything from the
# mahjong tiles to the end of the supplementary symbols plane.
_EMOJI_LEAD = re.compile("[\u00a9\u00ae\u2000-\u3300\U0001F000-\U0001FFFF]")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")


class LabelKind(str, Enum):
    DIVIDER = "divider"
    STICKY = "sticky"
    REGULAR = "regular"


def is_divider(label: str) -> bool:
    return bool(_DIVIDER.match(label.strip()))


def starts_with_emoji(label: str) -> bool:
    trimmed = label.strip()
    return bool(trimmed) and bool(_EMOJI_LEAD.match(trimmed[0]))


def is_all_caps(label: str) -> bool:
    """At least one A-Z and no a-z; digits, spaces and symbols are ignored."""
    trimmed = label.strip()
    return bool(_UPPER.search(trimmed)) and not _LOWER.search(trimmed)


def is_sticky_header(label: str, emoji: bool = True, caps: bool = True) -> bool:
    if not label.strip():
        return False
    if emoji and starts_with_emoji(label):
        return True
    return caps and is_all_caps(label)


def classify_label(label: str, config: Optional[SortConfig] = None) -> LabelKind:
    """Return the kind of *label*; a divider is never treated as a header."""
    config = config or SortConfig()
    if is_divider(label):
        return LabelKind.DIVIDER
    if is_sticky_header(label, emoji=config.emoji_headers, caps=config.caps_headers):
        return LabelKind.STICKY
    return LabelKind.REGULAR


def is_breaker(label: str, config: Optional[SortConfig] = None) -> bool:
    """True when *label* starts a new segment under *config*."""
    config = config or SortConfig()
    kind = classify_label(label, config)
    if kind is LabelKind.DIVIDER:
        return True
    return kind is LabelKind.STICKY and config.sticky_breaks_segments
