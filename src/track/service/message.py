# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from track.errors import EmptyCategoryError, EmptyValueError, TrackError
from track.service.entry import add_entry
from track.service.quantity import format_value


def split_message(text: str) -> tuple[str, str]:
    """Split `<category> <value>` on the first run of whitespace."""
    parts = text.strip().split(maxsplit=1)
    if len(parts) == 0:
        raise EmptyCategoryError("Message must start with a category")
    if len(parts) == 1:
        raise EmptyValueError(f"Message has no value for category '{parts[0]}'")
    return parts[0], parts[1]


def handle_message(text: str, track_file: Optional[Path] = None) -> str:
    """
    Record a chat style message and return the acknowledgement to send back.

    Failures are reported in the returned text rather than raised.
    """
    try:
        category, value = split_message(text)
        entry = add_entry(category, value, track_file=track_file)
    except TrackError as e:
        return f"Error: {e}"
    return f"Added {entry.category}: {format_value(entry.value)}"
