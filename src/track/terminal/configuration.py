# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from track import configuration
from track.repository.configuration import CONFIGURATION_REPO
from track.terminal.custom_typer import AliasedTyperGroup
from track.terminal.validate import validate_range

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("track_file", config["track_file"] or "None")
    table.add_row("track_file (in use)", str(configuration.TRACK_FILE_PATH))
    table.add_row("default_range", str(config["default_range"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    track_file: Annotated[
        Optional[str],
        typer.Option("--track-file", "-f", help="Path of the track file"),
    ] = None,
    remove_track_file: Annotated[
        bool,
        typer.Option(
            "--remove-track-file",
            "-rf",
            help="Go back to the default track file (~/.track)",
        ),
    ] = False,
    default_range: Annotated[
        Optional[int],
        typer.Option(
            "--default-range",
            "-r",
            callback=validate_range,
            help="Days covered by query when --range is not given",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Print the header above views"),
    ] = None,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        track_file=track_file,
        remove_track_file=remove_track_file,
        default_range=default_range,
        show_header=show_header,
    )
    view()
