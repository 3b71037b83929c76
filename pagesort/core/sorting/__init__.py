"""
Sorting module - Smart ordering of page-name lists

This module provides:
- Label classification (dividers, sticky headers, regular labels)
- Segmentation at dividers and headers
- Parent/child grouping by shared name suffix
- Locale-aware collation and the smart_sort entry point
"""

from .classify import LabelKind, classify_label, is_breaker, is_divider, is_sticky_header
from .collation import collation_key
from .engine import SortPlan, is_sorted, plan_sort, smart_sort, sort_segment
from .grouping import group_regular
from .segments import split_segments

__all__ = [
    'LabelKind',
    'classify_label',
    'collation_key',
    'group_regular',
    'is_breaker',
    'is_divider',
    'is_sorted',
    'is_sticky_header',
    'plan_sort',
    'smart_sort',
    'sort_segment',
    'split_segments',
    'SortPlan',
]
