"""Rich terminal reporter: both annotated views side by side."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from diffreport.diff.models import AnnotatedRow, AnnotatedView, Comparison, DiffFailed, RowStatus

_STATUS_STYLE = {
    RowStatus.UNCHANGED: "",
    RowStatus.CHANGED: "black on yellow",
    RowStatus.DELETED: "white on red",
    RowStatus.INSERTED: "black on green",
}

_STATUS_MARK = {
    RowStatus.UNCHANGED: " ",
    RowStatus.CHANGED: "~",
    RowStatus.DELETED: "-",
    RowStatus.INSERTED: "+",
}

_ERROR_TEXT = Text("Error occurred while calculating diff", style="bold red")


def _cell(row: Optional[AnnotatedRow]) -> Text:
    if row is None:
        return Text("")
    return Text(f"{_STATUS_MARK[row.status]} {row.text}", style=_STATUS_STYLE[row.status])


def _column(view: AnnotatedView) -> list:
    if isinstance(view, DiffFailed):
        return [None]
    return list(view)


def render(
    comparison: Comparison,
    *,
    console: Optional[Console] = None,
    show_summary: bool = True,
) -> None:
    """Print the comparison to the terminal using Rich."""
    console = console or Console()

    table = Table(show_lines=False, title_style="bold", border_style="dim")
    table.add_column(comparison.original_name, overflow="fold")
    table.add_column(comparison.revised_name, overflow="fold")

    left = _column(comparison.original_rows)
    right = _column(comparison.revised_rows)
    left_failed = isinstance(comparison.original_rows, DiffFailed)
    right_failed = isinstance(comparison.revised_rows, DiffFailed)

    for idx, (l_row, r_row) in enumerate(zip_longest(left, right)):
        l_cell = _ERROR_TEXT if left_failed and idx == 0 else _cell(l_row)
        r_cell = _ERROR_TEXT if right_failed and idx == 0 else _cell(r_row)
        table.add_row(l_cell, r_cell)

    console.print(table)

    if show_summary:
        _print_summary(console, comparison)


def _print_summary(console: Console, comparison: Comparison) -> None:
    console.print()
    for side, counts in comparison.summary().items():
        if counts is None:
            console.print(f"[dim]{side}:[/dim] [red]diff failed[/red]")
            continue
        console.print(
            f"[dim]{side}:[/dim] "
            f"{counts['changed']} changed, "
            f"{counts['deleted']} deleted, "
            f"{counts['inserted']} inserted"
        )
    if not comparison.failed and not comparison.has_changes:
        console.print("[bold green]Files are identical.[/bold green]")
