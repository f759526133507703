# SPDX-License-Identifier: MIT

from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from track.model.entry import Entry, Log, Quantity
from track.service.quantity import format_value
from track.time import datetime_to_display_local_datetime_str
from track.view.header import header


def value_type(entry: Entry) -> str:
    match entry.value:
        case Log():
            return "log"
        case Quantity():
            return "quantity"


def entries_view(
    track_file: Path,
    report_name: str,
    entries: list[Entry],
    columns: list[str] = ["timestamp", "category", "value"],
    no_wrap: bool = False,
) -> None:
    header(track_file, report_name)

    entries_table = Table(box=box.SIMPLE)
    for column in columns:
        if no_wrap and column == "value":
            entries_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            entries_table.add_column(column)

    for entry in entries:
        row = []
        for column in columns:
            column_value = ""
            if column == "timestamp":
                column_value = datetime_to_display_local_datetime_str(entry.timestamp)
            elif column == "category":
                column_value = escape(entry.category)
            elif column == "value":
                column_value = escape(format_value(entry.value))
            elif column == "type":
                column_value = value_type(entry)
            row.append(column_value)
        entries_table.add_row(*row)

    console = Console()
    console.print(entries_table)
