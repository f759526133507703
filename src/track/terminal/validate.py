# SPDX-License-Identifier: MIT

from typing import Optional

import typer


def validate_range(range_days: Optional[int]) -> Optional[int]:
    if range_days is None:
        return None
    if range_days < 0:
        raise typer.BadParameter("Range must be zero or a positive number of days")
    return range_days
