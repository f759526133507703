# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

import pendulum

from track import configuration
from track.errors import EmptyCategoryError, EmptyValueError, InvalidFieldError
from track.model.entry import Entry
from track.repository.entry import EntryRepository
from track.service.quantity import classify
from track.time import now_local


def normalize_category(category: str) -> str:
    normalized = category.strip().lower()
    if normalized == "":
        raise EmptyCategoryError("Category must not be empty")
    if "\n" in normalized or "\r" in normalized:
        raise InvalidFieldError("Category must not contain a line break")
    return normalized


def normalize_value(value: str) -> str:
    normalized = value.strip()
    if normalized == "":
        raise EmptyValueError("Value must not be empty")
    if "\n" in normalized or "\r" in normalized:
        raise InvalidFieldError("Value must not contain a line break")
    # The last colon of a line separates category from value
    if ":" in normalized:
        raise InvalidFieldError("Value must not contain ':'")
    return normalized


def create_entry(
    category: str,
    value: str,
    timestamp: Optional[pendulum.DateTime] = None,
) -> Entry:
    """
    Build an entry from user supplied fields.

    The category is stripped and lowercased, the value is stripped and
    classified as a Log or a Quantity, and the timestamp defaults to the
    current local time.
    """
    return Entry(
        timestamp=timestamp if timestamp is not None else now_local(),
        category=normalize_category(category),
        value=classify(normalize_value(value)),
    )


def add_entry(
    category: str,
    value: str,
    track_file: Optional[Path] = None,
    timestamp: Optional[pendulum.DateTime] = None,
) -> Entry:
    """
    Create an entry and append it to the track file.

    Args:
        category: Category text, e.g. "work" or "work:coding"
        value: Log text or a quantity such as "5km"
        track_file: File to append to (defaults to the configured track file)
        timestamp: Time of the entry (defaults to now)

    Returns:
        The entry that was written

    Raises:
        EmptyCategoryError, EmptyValueError, InvalidFieldError: On bad fields
        MalformedQuantityError: If the value looks numeric but is not a float
        StoreIoError: If the track file cannot be written
    """
    entry = create_entry(category, value, timestamp)
    repository = EntryRepository(
        track_file if track_file is not None else configuration.TRACK_FILE_PATH
    )
    repository.save_new_entry(entry)
    return entry
