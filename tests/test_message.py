from pathlib import Path

import pytest

from track.errors import EmptyCategoryError, EmptyValueError
from track.model.entry import Log, Quantity
from track.repository.entry import load_entries
from track.service.message import handle_message, split_message


def test_split_message_on_first_whitespace() -> None:
    assert split_message("work code review") == ("work", "code review")
    assert split_message("  run\t5 km ") == ("run", "5 km")


def test_split_message_without_value() -> None:
    with pytest.raises(EmptyValueError):
        split_message("work")


def test_split_empty_message() -> None:
    with pytest.raises(EmptyCategoryError):
        split_message("   ")


def test_handle_message_adds_entry(track_file: Path) -> None:
    assert handle_message("Work code review", track_file) == "Added work: code review"
    assert handle_message("run 5 km", track_file) == "Added run: 5.0 km"

    entries = load_entries(track_file)
    assert [entry.value for entry in entries] == [
        Log("code review"),
        Quantity(5.0, " km"),
    ]


def test_handle_message_reports_failures(track_file: Path) -> None:
    assert handle_message("work", track_file).startswith("Error: ")
    assert handle_message("work at 10:30", track_file) == (
        "Error: Value must not contain ':'"
    )
    assert handle_message("weight 1.2.3kg", track_file).startswith(
        "Error: Invalid number '1.2.3'"
    )
    assert load_entries(track_file) == []
