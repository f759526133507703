# SPDX-License-Identifier: MIT

from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from track.model.bucket import AggregateBucket, DaySummary
from track.service.quantity import format_magnitude
from track.time import date_to_display_str
from track.view.header import header


def bucket_lines(bucket: AggregateBucket) -> list[str]:
    """Logs first (by text, with an xN suffix for repeats), then quantities by unit."""
    lines = []
    for text, count in sorted(bucket["logs"].items()):
        lines.append(text if count == 1 else f"{text} x{count}")
    for unit, total in sorted(bucket["quantities"].items()):
        lines.append(f"{format_magnitude(total)}{unit}")
    return lines


def summary_rows(summary: list[DaySummary]) -> list[tuple[str, str, str]]:
    """
    Flatten a query result into (date, category, value) rows.

    The date is only filled on the first row of each day and the category
    only on the first row of each category within a day.
    """
    rows: list[tuple[str, str, str]] = []
    for day_summary in summary:
        date_column = date_to_display_str(day_summary.day)
        for category_summary in day_summary.categories:
            category_column = category_summary.category
            for line in bucket_lines(category_summary.bucket):
                rows.append((date_column, category_column, line))
                date_column = ""
                category_column = ""
    return rows


def summary_view(
    track_file: Path,
    report_name: str,
    summary: list[DaySummary],
    use_color: bool = True,
) -> None:
    header(track_file, report_name)

    summary_table = Table(box=box.SIMPLE)
    summary_table.add_column("date")
    summary_table.add_column("category")
    summary_table.add_column("value")

    for date_column, category_column, value_column in summary_rows(summary):
        category_column = escape(category_column)
        value_column = escape(value_column)
        if use_color and date_column != "":
            date_column = f"[cyan]{date_column}[/cyan]"
        if use_color and category_column != "":
            category_column = f"[green]{category_column}[/green]"
        summary_table.add_row(date_column, category_column, value_column)

    console = Console()
    console.print(summary_table)
