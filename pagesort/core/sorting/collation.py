"""
collation.py - Locale-aware string ordering for labels

The "locale" key follows the shape of the Unicode root collation (what a
browser's ``localeCompare`` uses without a locale): compare base letters
first, ignoring case and accents, with whitespace < punctuation < symbols <
digits < letters. Accents break ties next, then lowercase before uppercase,
and finally raw code points, so the order is total.
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Dict, Tuple

_WHITESPACE, _PUNCT, _SYMBOL, _DIGIT, _LETTER = range(5)


def _char_class(ch: str) -> int:
    if ch.isspace():
        return _WHITESPACE
    category = unicodedata.category(ch)
    if category[0] == "P":
        return _PUNCT
    if category[0] == "N":
        return _DIGIT
    if category[0] == "L":
        return _LETTER
    return _SYMBOL


# Letters that carry no combining mark after NFKD but still sort with a base
# letter (or pair), as in the root collation.
_BASE_LETTERS = {
    "\u00f8": "o",   # ø
    "\u00e6": "ae",  # æ
    "\u0153": "oe",  # œ
    "\u0142": "l",   # ł
    "\u0111": "d",   # đ
    "\u00f0": "d",   # ð
    "\u00fe": "th",  # þ
    "\u0127": "h",   # ħ
    "\u0131": "i",   # ı
    "\u0167": "t",   # ŧ
}


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


def locale_key(label: str) -> Tuple:
    folded = unicodedata.normalize("NFKD", label.casefold())
    base = "".join(_BASE_LETTERS.get(ch, ch) for ch in folded if not _is_mark(ch))
    primary = tuple((_char_class(ch), ch) for ch in base)
    # Accents only matter once the base letters are equal.
    secondary = tuple(ord(ch) for ch in folded)
    tertiary = tuple(1 if ch.isupper() else 0 for ch in label)
    return (primary, secondary, tertiary, label)


def codepoint_key(label: str) -> str:
    return label


_KEYS: Dict[str, Callable[[str], object]] = {
    "locale": locale_key,
    "codepoint": codepoint_key,
}


def collation_key(label: str, collation: str = "locale"):
    """Return a sort key for *label* under the named collation."""
    return _KEYS[collation](label)


def key_function(collation: str = "locale") -> Callable[[str], object]:
    """Return the key callable for ``sorted(..., key=...)``."""
    return _KEYS[collation]
