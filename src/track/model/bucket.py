# SPDX-License-Identifier: MIT

from typing import NamedTuple, TypedDict

import pendulum


class AggregateBucket(TypedDict):
    logs: dict[str, int]  # log text -> occurrence count
    quantities: dict[str, float]  # unit -> summed magnitude


class CategorySummary(NamedTuple):
    category: str
    bucket: AggregateBucket


class DaySummary(NamedTuple):
    day: pendulum.Date
    categories: list[CategorySummary]
