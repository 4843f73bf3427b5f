from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class HoursChange:
    hours: Decimal
    effective_date: date


@dataclass(frozen=True)
class Department:
    """Domain entity: Department.

    ``hours`` caches the latest value; ``hours_history`` is the source of truth
    for pay computations and is kept sorted by effective date.
    """

    name: str
    hours: Decimal
    hours_history: tuple[HoursChange, ...] = ()
    version: int = 0

    def with_hours_change(self, hours: Decimal, effective_date: date) -> "Department":
        history = sorted(
            self.hours_history + (HoursChange(hours=hours, effective_date=effective_date),),
            key=lambda h: h.effective_date,
        )
        return replace(self, hours=hours, hours_history=tuple(history))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "hours": float(self.hours),
            "hoursHistory": [
                {"hours": float(h.hours), "effectiveDate": h.effective_date.strftime("%Y-%m-%d")}
                for h in self.hours_history
            ],
        }
