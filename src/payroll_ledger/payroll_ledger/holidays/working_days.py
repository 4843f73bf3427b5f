"""Working-day calendar.

A working day is a Monday..Saturday date that is not in the holiday set.
"""

from __future__ import annotations

from datetime import date
from typing import AbstractSet

from ..common.datetime_utils import day_name, days_in_month
from ..core.constants import REGULAR_DAYS


def is_regular_day(value: date) -> bool:
    return day_name(value) in REGULAR_DAYS


def is_working_day(value: date, holidays: AbstractSet[date]) -> bool:
    return value not in holidays and is_regular_day(value)


def working_days_in_month(year: int, month: int, holidays: AbstractSet[date]) -> int:
    """Count Mon-Sat days of the month that are not holidays."""
    return sum(
        1
        for day in range(1, days_in_month(year, month) + 1)
        if is_working_day(date(year, month, day), holidays)
    )
