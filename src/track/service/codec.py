# SPDX-License-Identifier: MIT

import re

from track.errors import MalformedLineError, MalformedTimestampError
from track.model.entry import Entry
from track.service.quantity import classify, format_value
from track.time import datetime_from_rfc3339_str, datetime_to_rfc3339_str

# Greedy category capture: the value starts after the last colon
ENTRY_LINE_PATTERN = re.compile(r"^\[([^\]]*)\] (.*):(.*)$")


def serialize_entry(entry: Entry) -> str:
    """Render an entry as `[<RFC3339 timestamp>] <category>:<value>` (no newline)."""
    return (
        f"[{datetime_to_rfc3339_str(entry.timestamp)}] "
        f"{entry.category}:{format_value(entry.value)}"
    )


def parse_entry(line: str) -> Entry:
    """
    Parse one non-blank line of the track file.

    Raises:
        MalformedLineError: If the bracket/colon structure does not match
        MalformedTimestampError: If the bracketed text is not RFC3339
        MalformedQuantityError: If the value looks numeric but is not a float
    """
    match = ENTRY_LINE_PATTERN.match(line)
    if match is None:
        raise MalformedLineError("Could not parse line for entry", line)

    raw_timestamp, category, raw_value = match.groups()

    try:
        timestamp = datetime_from_rfc3339_str(raw_timestamp)
    except ValueError:
        raise MalformedTimestampError(f"Invalid timestamp '{raw_timestamp}'", line)

    value = classify(raw_value)
    return Entry(timestamp=timestamp, category=category, value=value)
