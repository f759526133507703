# SPDX-License-Identifier: MIT

import logging
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Annotated, Optional

import typer

from track import configuration
from track.errors import TrackError
from track.logging_config import setup_logging
from track.repository.configuration import CONFIGURATION_REPO
from track.repository.entry import EntryRepository
from track.service.aggregate import query as query_entries
from track.service.entry import add_entry
from track.service.message import handle_message
from track.terminal import configuration as configuration_terminal
from track.terminal.custom_typer import OrderedAliasedTyperGroup
from track.terminal.validate import validate_range
from track.view import state as view_state
from track.view.entries import entries_view
from track.view.summary import summary_view

logger = logging.getLogger(__name__)

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Track - Categorized log entries and quantities in a plain text file",
    no_args_is_help=True,
)
app.add_typer(configuration_terminal.app, name="config, c")


@app.callback()
def main_callback(
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Path to track file",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """
    Track - Categorized log entries and quantities in a plain text file

    Global options that apply to all commands.
    """
    setup_logging(verbose)
    if file is not None:
        configuration.set_track_file_override(file)
    if no_header:
        view_state.set_show_header(False)
    logger.debug("Using track file %s", configuration.TRACK_FILE_PATH)


@app.command("add, a", no_args_is_help=True)
def add(
    category: Annotated[str, typer.Argument(help="the category for the entry")],
    value: Annotated[
        str, typer.Argument(help="the value for the entry, e.g. 'ran' or '5km'")
    ],
) -> None:
    """
    Add a new entry.
    """
    track_file = configuration.TRACK_FILE_PATH
    try:
        entry = add_entry(category, value, track_file=track_file)
    except TrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.debug("Appended entry to %s", track_file)
    entries_view(
        track_file,
        "add",
        [entry],
        columns=["timestamp", "category", "value", "type"],
    )


@app.command("read, r")
def read(
    no_wrap: Annotated[
        bool, typer.Option("--no-wrap", help="Truncate long values")
    ] = False,
) -> None:
    """
    Show every entry of the track file.
    """
    repository = EntryRepository(configuration.TRACK_FILE_PATH)
    try:
        entries = repository.get_all_entries()
    except TrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.debug("Loaded %d entries", len(entries))
    entries_view(repository.track_file, "read", entries, no_wrap=no_wrap)


@app.command("query, q")
def query(
    category: Annotated[
        str,
        typer.Argument(help="substring of the categories to summarize (default: all)"),
    ] = "",
    range_days: Annotated[
        Optional[int],
        typer.Option(
            "--range",
            "-r",
            callback=validate_range,
            help="number of days to look back (default: config default_range)",
        ),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    """
    Summarize entries per day and category: log counts and quantity sums.
    """
    if range_days is None:
        range_days = CONFIGURATION_REPO.get_config()["default_range"]

    repository = EntryRepository(configuration.TRACK_FILE_PATH)
    try:
        summary = query_entries(repository.get_all_entries(), category, range_days)
    except TrackError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger.debug(
        "Summarized %d days for category filter %r over %d days",
        len(summary),
        category,
        range_days,
    )
    summary_view(
        repository.track_file,
        f"query: {category or '*'} ({range_days}d)",
        summary,
        use_color=not no_color,
    )


@app.command("listen, l")
def listen() -> None:
    """
    Add entries from messages on stdin, one '<category> <value>' per line.

    An acknowledgement is printed for every message.
    """
    track_file = configuration.TRACK_FILE_PATH
    stdin = typer.get_text_stream("stdin")
    for line in stdin:
        message = line.strip()
        if message == "":
            continue
        acknowledgement = handle_message(message, track_file=track_file)
        logger.debug("Handled message %r: %s", message, acknowledgement)
        typer.echo(acknowledgement)


@app.command("version, ve")
def version() -> None:
    """
    Show the installed version of track.
    """
    try:
        typer.echo(f"track {package_version('track')}")
    except PackageNotFoundError:
        typer.echo("track (not installed)")


def run() -> None:
    app()
