# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from track.view.state import get_show_header


def header(track_file: Path, sub_header: Optional[str] = None) -> None:
    """Print the application header with the track file in use.

    Args:
        track_file: The track file being read or written
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{escape(sub_header)}[/sandy_brown]"

    print(Padding("[dark_orange]track[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]{escape(str(track_file))}[/plum1]", (0, 1)))
