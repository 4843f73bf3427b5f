from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .strategies.base import WorkTypeStrategy


@dataclass(frozen=True)
class Entry:
    """One ledger row: a single working day of one employee.

    ``hours`` is computed; ``start_time``, ``end_time`` and ``hours_input`` are
    the raw declaration kept so the day stays editable.
    """

    entry_id: int
    work_date: date
    day: str
    hours: Decimal
    pay: Decimal
    work_type: WorkTypeStrategy
    start_time: str = ""
    end_time: str = ""
    hours_input: Decimal = Decimal(0)

    @property
    def label(self) -> str:
        return self.work_type.label

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "day": self.day,
            "hours": float(self.hours),
            "pay": float(self.pay),
            "workType": self.label,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "hoursWorked": float(self.hours_input),
        }
