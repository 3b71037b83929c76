"""
engine.py - Smart sort pipeline: classify → segment → group → order

Rules:
1. Dividers (only hyphens) and sticky headers (emoji-led or ALL CAPS) start
   a new segment; segments never move relative to each other.
2. Inside a segment sticky headers come first, in their original order,
   then the regular labels.
3. Regular labels: roots, orphans and dividers are sorted together; each
   root is followed by its children, also sorted. Dividers never group.

The pipeline is pure: it never raises for a list of strings and always
returns a permutation of its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pagesort.core.config import SortConfig
from pagesort.utils.logging_helper import get_logger
from .classify import LabelKind, classify_label
from .collation import key_function
from .grouping import group_regular
from .segments import split_segments

log = get_logger()


@dataclass
class Entry:
    """A top-level label and the children listed right under it."""
    label: str
    children: List[str] = field(default_factory=list)
    divider: bool = False


@dataclass
class SegmentPlan:
    headers: List[str] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)

    def labels(self) -> List[str]:
        out = list(self.headers)
        for entry in self.entries:
            out.append(entry.label)
            out.extend(entry.children)
        return out


@dataclass
class SortPlan:
    segments: List[SegmentPlan] = field(default_factory=list)

    def labels(self) -> List[str]:
        return [label for segment in self.segments for label in segment.labels()]


def _order_regular(items: List[str], dividers: List[str], config: SortConfig) -> List[Entry]:
    key = key_function(config.collation)
    divider_entries = [Entry(item, divider=True) for item in dividers]
    if not config.group_children:
        entries = [Entry(item) for item in items] + divider_entries
        return sorted(entries, key=lambda entry: key(entry.label))

    grouping = group_regular(items)
    entries = [Entry(item) for item in grouping.roots + grouping.orphans] + divider_entries
    entries.sort(key=lambda entry: key(entry.label))
    emitted = set()
    for entry in entries:
        parent_key = entry.label.strip()
        # Duplicate roots share one child list; it goes under the first.
        if not entry.divider and parent_key in grouping.children and parent_key not in emitted:
            entry.children = sorted(grouping.children[parent_key], key=key)
            emitted.add(parent_key)
    return entries


def plan_segment(segment: List[str], config: Optional[SortConfig] = None) -> SegmentPlan:
    config = config or SortConfig()
    plan = SegmentPlan()
    regular: List[str] = []
    dividers: List[str] = []
    for label in segment:
        kind = classify_label(label, config)
        if kind is LabelKind.STICKY:
            plan.headers.append(label)
        elif kind is LabelKind.DIVIDER:
            dividers.append(label)
        else:
            regular.append(label)

    plan.entries = _order_regular(regular, dividers, config)
    return plan


def sort_segment(segment: List[str], config: Optional[SortConfig] = None) -> List[str]:
    """Order one segment: sticky headers, then sorted and grouped labels."""
    return plan_segment(segment, config).labels()


def plan_sort(labels: Iterable[str], config: Optional[SortConfig] = None) -> SortPlan:
    """Run the pipeline and keep its structure (for previews)."""
    config = config or SortConfig()
    segments = split_segments(labels, config)
    plan = SortPlan([plan_segment(segment, config) for segment in segments])
    log.debug(
        f"Planned {len(plan.segments)} segment(s), "
        f"{sum(len(s.entries) for s in plan.segments)} top-level label(s)"
    )
    return plan


def smart_sort(labels: Iterable[str], config: Optional[SortConfig] = None) -> List[str]:
    """Return *labels* in smart-sorted order.

    >>> smart_sort(["Premium Price Card", "Card", "Alien", "Price Card"])
    ['Alien', 'Card', 'Premium Price Card', 'Price Card']
    """
    return plan_sort(labels, config).labels()


def is_sorted(labels: Iterable[str], config: Optional[SortConfig] = None) -> bool:
    """True when *labels* are already in smart-sorted order."""
    labels = list(labels)
    return smart_sort(labels, config) == labels
