#!/usr/bin/env python
"""
smart_sort.py  –  Smart-sort page-name lists (one name per line).

Examples
────────
# 1) Sort a list and print it
pagesort pages.txt

# 2) Sort several lists in place (progress bar shown)
pagesort lists/*.txt --in-place

# 3) Pipe through stdin, preview the grouping on stderr
pbpaste | pagesort --preview > sorted.txt

# 4) CI guard: fail when a list is not in smart-sorted order
pagesort pages.txt --check
"""

from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

from pagesort.core.config import ConfigError, SortConfig, load_config, COLLATIONS
from pagesort.core.preview import print_preview
from pagesort.core.sorting import is_sorted, plan_sort
from pagesort.utils.io_helpers import ensure_utf8_windows, read_stdin, read_utf8_with_bom, write_utf8
from pagesort.utils.logging_helper import get_logger, set_level
from pagesort.utils.text_processing import (
    detect_newline, drop_blank_lines, join_lines, repair_labels, split_lines,
)

log = get_logger()

STDIN = "-"

# ─── helpers ───────────────────────────────────────────────────────────────
def read_source(source: str) -> Tuple[str, bool]:
    """Return (text, had_bom); stdin never reports a BOM."""
    if source == STDIN:
        return read_stdin(), False
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {source}")
    return read_utf8_with_bom(path)

def prepare_labels(text: str, config: SortConfig) -> List[str]:
    labels = split_lines(text)
    if config.fix_text:
        labels = repair_labels(labels)
    if config.drop_blank:
        labels = drop_blank_lines(labels)
    return labels

def sort_text(text: str, config: SortConfig, preview: bool = False,
              title: str = "Smart sort preview") -> Tuple[str, bool]:
    """Return (sorted text, changed?) for one block of page names.

    The first line break found in *text* is used for every line of the result.
    """
    labels = prepare_labels(text, config)
    plan = plan_sort(labels, config)
    if preview:
        print_preview(plan, title=title)
    ordered = plan.labels()
    trailing = text.endswith(("\n", "\r")) or not text
    result = join_lines(ordered, trailing_newline=trailing, newline=detect_newline(text))
    return result, ordered != split_lines(text)

# ─── CLI ────────────────────────────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pagesort",
        description="Smart-sort page names: dividers, sticky headers, "
                    "and parent/child grouping by shared suffix."
    )
    ap.add_argument("sources", nargs="*", default=[STDIN],
                    help="Files with one page name per line ('-' or nothing for stdin).")
    target = ap.add_mutually_exclusive_group()
    target.add_argument("--out", "-o", type=Path,
                        help="Write the sorted list here instead of stdout.")
    target.add_argument("--in-place", action="store_true",
                        help="Rewrite each source file with its sorted list.")
    target.add_argument("--check", action="store_true",
                        help="Exit 1 if any list is not already smart-sorted.")
    ap.add_argument("--preview", action="store_true",
                    help="Print the segment / grouping tree to stderr.")
    ap.add_argument("--config", type=Path,
                    help="YAML config (default: $PAGESORT_CONFIG or config/pagesort.yaml).")
    ap.add_argument("--collation", choices=COLLATIONS,
                    help="String ordering for labels (default: locale).")
    ap.add_argument("--drop-blank", action="store_true", default=None,
                    help="Remove blank lines before sorting.")
    ap.add_argument("--fix-text", action="store_true", default=None,
                    help="Repair mojibake in names with ftfy before sorting.")
    ap.add_argument("--no-sticky-breaks", dest="sticky_breaks_segments",
                    action="store_false", default=None,
                    help="Only dividers split segments; headers are hoisted in place.")
    ap.add_argument("--no-grouping", dest="group_children",
                    action="store_false", default=None,
                    help="Plain locale sort inside segments, no parent/child grouping.")
    ap.add_argument("--verbose", "-v", action="store_true",
                    help="Debug logging.")
    return ap

def run(args: argparse.Namespace) -> int:
    config = load_config(args.config).with_overrides(
        collation=args.collation,
        drop_blank=args.drop_blank,
        fix_text=args.fix_text,
        sticky_breaks_segments=args.sticky_breaks_segments,
        group_children=args.group_children,
    )
    sources = args.sources or [STDIN]
    if len(sources) > 1 and not (args.in_place or args.check):
        raise ValueError("Several sources need --in-place or --check.")
    if args.in_place and STDIN in sources:
        raise ValueError("--in-place cannot rewrite stdin.")

    iterable = tqdm(sources, desc="Sorting", unit="file", file=sys.stderr) \
               if len(sources) > 1 else sources

    unsorted: List[str] = []
    for source in iterable:
        text, bom = read_source(source)
        name = "<stdin>" if source == STDIN else source

        if args.check:
            labels = prepare_labels(text, config)
            if not is_sorted(labels, config):
                unsorted.append(name)
            continue

        result, changed = sort_text(text, config, preview=args.preview, title=name)
        if args.in_place:
            if changed:
                write_utf8(Path(source), result, bom=bom)
            log.info(f"{name}: {'sorted' if changed else 'already sorted'}")
        elif args.out:
            write_utf8(args.out, result, bom=bom)
            log.info(f"{name} → {args.out}")
        else:
            sys.stdout.write(result)

    if args.check:
        for name in unsorted:
            log.warning(f"{name}: not in smart-sorted order")
        return 1 if unsorted else 0
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    ensure_utf8_windows()
    if args.verbose:
        set_level(logging.DEBUG)
    try:
        return run(args)
    except (ConfigError, FileNotFoundError, UnicodeDecodeError, ValueError) as exc:
        log.error(f"✖ {exc}")
        return 2

if __name__ == "__main__":
    sys.exit(main())
