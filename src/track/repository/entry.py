# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from track.errors import ParseError, StoreIoError
from track.model.entry import Entry
from track.service.codec import parse_entry, serialize_entry


def ensure_track_file(path: Path) -> None:
    try:
        if not path.is_file():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
    except OSError as e:
        raise StoreIoError(f"Unable to create track file {path}: {e}") from e


def load_entries(path: Path) -> list[Entry]:
    """
    Read every entry from the track file, in file order.

    The file is created empty if it does not exist. Blank lines are skipped.
    The first line that fails to parse aborts the load; the raised ParseError
    carries the offending line and its 1-based line number.
    """
    ensure_track_file(path)

    entries: list[Entry] = []
    try:
        with path.open("r", encoding="utf-8") as track_file:
            for line_number, raw_line in enumerate(track_file, start=1):
                line = raw_line.rstrip("\r\n")
                if line == "":
                    continue
                try:
                    entries.append(parse_entry(line))
                except ParseError as e:
                    e.line = line
                    e.line_number = line_number
                    raise
    except OSError as e:
        raise StoreIoError(f"Unable to read track file {path}: {e}") from e

    return entries


def append_entry(path: Path, entry: Entry) -> None:
    """Append one serialized entry and a newline. No locking is done."""
    try:
        with path.open("a", encoding="utf-8") as track_file:
            track_file.write(serialize_entry(entry) + "\n")
    except OSError as e:
        raise StoreIoError(f"Unable to write track file {path}: {e}") from e


class EntryRepository:
    def __init__(self, track_file: Path) -> None:
        self.track_file = track_file
        self._entries: Optional[list[Entry]] = None

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self._entries = load_entries(self.track_file)
        return self._entries

    def save_new_entry(self, entry: Entry) -> None:
        ensure_track_file(self.track_file)
        append_entry(self.track_file, entry)
        if self._entries is not None:
            self._entries.append(entry)

    def get_all_entries(self) -> list[Entry]:
        return list(self.entries)
