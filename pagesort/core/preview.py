"""
preview.py - Render a sort plan for review before applying it

Shows each segment with its divider, sticky headers, top-level labels and
the children grouped under them, plus a one-line summary table.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from pagesort.core.sorting.engine import SortPlan


def _shown(label: str) -> str:
    # Blank labels would render as nothing at all.
    return escape(label) if label.strip() else "[dim]<blank>[/]"


def build_tree(plan: SortPlan, title: str = "Smart sort preview") -> Tree:
    tree = Tree(f"[bold cyan]{escape(title)}[/]")
    for number, segment in enumerate(plan.segments, start=1):
        branch = tree.add(f"[dim]segment {number}[/]")
        for header in segment.headers:
            branch.add(f"[bold yellow]{escape(header)}[/]")
        for entry in segment.entries:
            if entry.divider:
                branch.add(f"[magenta]{escape(entry.label)}[/]")
                continue
            node = branch.add(_shown(entry.label))
            for child in entry.children:
                node.add(f"[green]{_shown(child)}[/]")
    return tree


def build_summary(plan: SortPlan) -> Table:
    table = Table(title="Summary", box=box.ROUNDED)
    table.add_column("Segments", style="cyan")
    table.add_column("Headers", style="yellow")
    table.add_column("Top-level", style="magenta")
    table.add_column("Children", style="green")
    table.add_row(
        str(len(plan.segments)),
        str(sum(len(s.headers) for s in plan.segments)),
        str(sum(len(s.entries) for s in plan.segments)),
        str(sum(len(e.children) for s in plan.segments for e in s.entries)),
    )
    return table


def print_preview(plan: SortPlan, console: Optional[Console] = None, title: str = "Smart sort preview") -> None:
    """Print the plan tree and summary (to stderr unless a console is given)."""
    console = console or Console(stderr=True)
    console.print(build_tree(plan, title))
    console.print(build_summary(plan))
