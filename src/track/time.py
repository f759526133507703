# SPDX-License-Identifier: MIT

import re
from typing import cast

import pendulum

_RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_rfc3339_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def is_rfc3339_str(datetime: str) -> bool:
    return _RFC3339_PATTERN.match(datetime) is not None


def datetime_from_rfc3339_str(datetime: str) -> pendulum.DateTime:
    """Parse an RFC3339 string, keeping its UTC offset.

    Raises ValueError when the string is not RFC3339 or names an
    impossible date or time.
    """
    if not is_rfc3339_str(datetime):
        raise ValueError(f"not an RFC3339 datetime: {datetime!r}")
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not an RFC3339 datetime: {datetime!r}")
    return cast(pendulum.DateTime, parsed)


def datetime_to_local_date(datetime: pendulum.DateTime) -> pendulum.Date:
    return datetime.in_tz("local").date()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd HH:mm")


