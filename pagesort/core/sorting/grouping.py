"""
grouping.py - Parent/child grouping by shared name suffix

"Price Card" ends with " Card", so when "Card" is also in the segment it is
the parent of "Price Card". Each label binds to its *shortest* matching
parent, which flattens chains: "Deep Space Card" goes under "Card" even when
"Space Card" exists. A label that is somebody's parent is always a root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, List, Optional


@dataclass
class Grouping:
    roots: List[str] = field(default_factory=list)
    orphans: List[str] = field(default_factory=list)
    # parent key (trimmed text) -> children in input order
    children: Dict[str, List[str]] = field(default_factory=dict)
    # item position -> parent key it is bound to
    parent_of: Dict[int, str] = field(default_factory=dict)

    @property
    def parents(self) -> set:
        return set(self.parent_of.values())


def bound_parent(key: str, known: AbstractSet[str]) -> Optional[str]:
    """Return the shortest label in *known* that *key* ends with after a space.

    Walking the spaces right to left yields candidate suffixes shortest
    first, so the first hit wins. Only strictly shorter suffixes are tried,
    which keeps a label from matching itself.
    """
    pos = key.rfind(" ")
    while pos >= 0:
        suffix = key[pos + 1:]
        if suffix and suffix in known:
            return suffix
        pos = key.rfind(" ", 0, pos)
    return None


def group_regular(items: List[str]) -> Grouping:
    """Split the regular items of one segment into roots, children and orphans."""
    keys = [item.strip() for item in items]
    known = {key for key in keys if key}

    grouping = Grouping()
    for index, key in enumerate(keys):
        parent = bound_parent(key, known)
        if parent is not None:
            grouping.parent_of[index] = parent

    parents = grouping.parents
    for index, item in enumerate(items):
        if keys[index] in parents:
            grouping.roots.append(item)
        elif index in grouping.parent_of:
            grouping.children.setdefault(grouping.parent_of[index], []).append(item)
        else:
            grouping.orphans.append(item)
    return grouping
