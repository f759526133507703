# SPDX-License-Identifier: MIT

import math
import re
from decimal import Decimal

from track.errors import MalformedQuantityError
from track.model.entry import EntryValue, Log, Quantity

# Presence test only: sign, then digits and points starting with a digit
# or a point followed by a digit. float() decides whether it is valid.
NUMERIC_PREFIX_PATTERN = re.compile(r"^[+-]?\.?\d[\d.]*")


def classify(raw: str) -> EntryValue:
    """
    Classify a value string as a Log or a Quantity.

    Anything that does not start with a number is a Log. Otherwise the
    numeric prefix becomes the magnitude and the rest of the string, kept
    verbatim, becomes the unit, which may be empty. "5 km" keeps the space so
    that a unit starting with a digit or a point is not read back as part of
    the number.

    Raises:
        MalformedQuantityError: If the numeric prefix is not a finite float,
            e.g. "12.34.56abc"
    """
    value = raw.strip()

    match = NUMERIC_PREFIX_PATTERN.match(value)
    if match is None:
        return Log(value)

    prefix = match.group(0)
    try:
        magnitude = float(prefix)
    except ValueError:
        raise MalformedQuantityError(f"Invalid number '{prefix}'", value)
    if not math.isfinite(magnitude):
        raise MalformedQuantityError(f"Number '{prefix}' is out of range", value)

    unit = value[match.end() :]
    return Quantity(magnitude, unit)


def format_magnitude(magnitude: float) -> str:
    """
    Render a magnitude as the shortest digits that round-trip through float,
    always in positional notation (12.0, -3.5, 0.00001, 10000000000000000).
    """
    return format(Decimal(repr(magnitude)), "f")


def format_value(value: EntryValue) -> str:
    match value:
        case Log(text=text):
            return text
        case Quantity(magnitude=magnitude, unit=unit):
            return f"{format_magnitude(magnitude)}{unit}"
