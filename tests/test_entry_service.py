from collections.abc import Callable
from pathlib import Path

import pendulum
import pytest

from track import configuration
from track.errors import (
    EmptyCategoryError,
    EmptyValueError,
    InvalidFieldError,
    MalformedQuantityError,
)
from track.model.entry import Log, Quantity
from track.repository.entry import load_entries
from track.service.entry import add_entry, create_entry


def test_create_entry_normalizes_fields(
    local_datetime: Callable[..., pendulum.DateTime],
) -> None:
    timestamp = local_datetime(2026, 10, 19, 8)

    entry = create_entry("  Work:Coding ", " 2.5h ", timestamp)

    assert entry.timestamp == timestamp
    assert entry.category == "work:coding"
    assert entry.value == Quantity(2.5, "h")


def test_create_entry_defaults_to_now() -> None:
    before = pendulum.now()
    entry = create_entry("mood", "fine")
    after = pendulum.now()

    assert before <= entry.timestamp <= after
    assert entry.value == Log("fine")


@pytest.mark.parametrize(
    "category, value, error",
    [
        ("", "coding", EmptyCategoryError),
        ("   ", "coding", EmptyCategoryError),
        ("work", "", EmptyValueError),
        ("work", "  ", EmptyValueError),
        ("work", "meeting at 10:30", InvalidFieldError),
        ("work", "two\nlines", InvalidFieldError),
        ("work\nplay", "coding", InvalidFieldError),
        ("weight", "70.5.1kg", MalformedQuantityError),
    ],
)
def test_create_entry_rejects_bad_fields(
    category: str, value: str, error: type[Exception]
) -> None:
    with pytest.raises(error):
        create_entry(category, value)


def test_add_entry_appends_to_given_file(track_file: Path) -> None:
    entry = add_entry("Run", "5km", track_file=track_file)

    assert load_entries(track_file) == [entry]
    assert track_file.read_text().endswith("] run:5.0km\n")


def test_add_entry_uses_configured_track_file() -> None:
    entry = add_entry("work", "coding")

    assert configuration.TRACK_FILE_PATH.is_file()
    assert load_entries(configuration.TRACK_FILE_PATH) == [entry]


def test_add_entry_does_not_write_rejected_entry(track_file: Path) -> None:
    with pytest.raises(EmptyValueError):
        add_entry("work", "", track_file=track_file)

    assert not track_file.exists()
