# SPDX-License-Identifier: MIT

from typing import NamedTuple, Union

import pendulum


class Log(NamedTuple):
    text: str


class Quantity(NamedTuple):
    magnitude: float
    unit: str


# Closed set of value variants; match on Log / Quantity exhaustively
EntryValue = Union[Log, Quantity]


class Entry(NamedTuple):
    timestamp: pendulum.DateTime
    category: str
    value: EntryValue
