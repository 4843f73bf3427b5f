from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, Iterable


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a company-wide holiday, applies to every department."""

    holiday_date: date

    def to_dict(self) -> dict:
        return {"date": self.holiday_date.strftime("%Y-%m-%d")}


def holiday_dates(holidays: Iterable[Holiday]) -> AbstractSet[date]:
    return frozenset(h.holiday_date for h in holidays)
