# SPDX-License-Identifier: MIT

from itertools import groupby
from typing import Iterable, Optional

import pendulum

from track.errors import InvalidRangeError
from track.model.bucket import AggregateBucket, CategorySummary, DaySummary
from track.model.entry import Entry, EntryValue, Log, Quantity
from track.time import datetime_to_local_date, today_local


def aggregate_bucket(values: Iterable[EntryValue]) -> AggregateBucket:
    """Count log texts and sum quantity magnitudes per unit."""
    bucket: AggregateBucket = {"logs": {}, "quantities": {}}
    for value in values:
        match value:
            case Log(text=text):
                bucket["logs"][text] = bucket["logs"].get(text, 0) + 1
            case Quantity(magnitude=magnitude, unit=unit):
                bucket["quantities"][unit] = (
                    bucket["quantities"].get(unit, 0.0) + magnitude
                )
    return bucket


def filter_entries(
    entries: list[Entry],
    category_filter: str,
    min_date: pendulum.Date,
) -> list[Entry]:
    """Keep entries whose category contains the filter and whose day is after min_date."""
    return [
        entry
        for entry in entries
        if category_filter in entry.category
        and datetime_to_local_date(entry.timestamp) > min_date
    ]


def group_by_day(entries: list[Entry]) -> list[tuple[pendulum.Date, list[Entry]]]:
    """Group entries by local calendar day, days in first-seen order."""
    days: dict[pendulum.Date, list[Entry]] = {}
    for entry in entries:
        days.setdefault(datetime_to_local_date(entry.timestamp), []).append(entry)
    return list(days.items())


def summarize_day(entries: list[Entry]) -> list[CategorySummary]:
    """Sort a day's entries by category, then aggregate each run of equal categories."""
    sorted_entries = sorted(entries, key=lambda entry: entry.category)
    return [
        CategorySummary(
            category=category,
            bucket=aggregate_bucket(entry.value for entry in category_entries),
        )
        for category, category_entries in groupby(
            sorted_entries, key=lambda entry: entry.category
        )
    ]


def query(
    entries: list[Entry],
    category_filter: str,
    range_days: int,
    today: Optional[pendulum.Date] = None,
) -> list[DaySummary]:
    """
    Summarize entries per day and per category over the last range_days days.

    The boundary is strict: an entry dated exactly range_days ago is left
    out, one dated range_days - 1 ago is kept. Days keep the order in which
    they first appear in entries; categories within a day are sorted.

    Args:
        entries: Entries in track file order
        category_filter: Substring the category must contain ("" matches all)
        range_days: Size of the lookback window in days
        today: Local calendar date the window ends on (defaults to today)

    Raises:
        InvalidRangeError: If range_days is negative or reaches before year 1
    """
    if range_days < 0:
        raise InvalidRangeError(f"Range must not be negative, got {range_days}")

    if today is None:
        today = today_local()
    try:
        min_date = today.subtract(days=range_days)
    except OverflowError:
        raise InvalidRangeError(f"Range of {range_days} days is too large")

    matching_entries = filter_entries(entries, category_filter, min_date)
    return [
        DaySummary(day=day, categories=summarize_day(day_entries))
        for day, day_entries in group_by_day(matching_entries)
    ]
