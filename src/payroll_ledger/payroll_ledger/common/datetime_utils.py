from __future__ import annotations

import calendar
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    try:
        return datetime.strptime(str(value).strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def day_name(value: date) -> str:
    return calendar.day_name[value.weekday()]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def iter_month_starts(first: date, last: date) -> Iterator[date]:
    """Yield the 1st of every month from ``first``'s month up to ``last``'s month."""
    cursor = first.replace(day=1)
    while cursor <= last:
        yield cursor
        if cursor.month == 12:
            cursor = cursor.replace(year=cursor.year + 1, month=1)
        else:
            cursor = cursor.replace(month=cursor.month + 1)


def hours_between(start: time, end: time) -> Decimal:
    minutes = (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)
    return Decimal(minutes) / Decimal(60)
