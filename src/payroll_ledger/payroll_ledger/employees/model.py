from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional

from ..entries.model import Entry


@dataclass(frozen=True)
class SalaryChange:
    salary: Decimal
    effective_date: date


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee with its embedded salary history and ledger.

    Note: ``department`` is a name reference, not an owning relationship.
    """

    name: str
    base_salary: Decimal
    start_date: date
    department: str
    end_date: Optional[date] = None
    salary_history: tuple[SalaryChange, ...] = ()
    entries: tuple[Entry, ...] = ()
    version: int = 0

    @property
    def is_active(self) -> bool:
        return self.end_date is None

    def is_active_on(self, value: date) -> bool:
        if value < self.start_date:
            return False
        return self.end_date is None or value <= self.end_date

    def with_salary_change(self, salary: Decimal, effective_date: date) -> "Employee":
        history = sorted(
            self.salary_history + (SalaryChange(salary=salary, effective_date=effective_date),),
            key=lambda h: h.effective_date,
        )
        return replace(self, base_salary=salary, salary_history=tuple(history))

    def entry_for(self, value: date) -> Optional[Entry]:
        for entry in self.entries:
            if entry.work_date == value:
                return entry
        return None

    def next_entry_id(self) -> int:
        if not self.entries:
            return 0
        return max(e.entry_id for e in self.entries) + 1

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "baseSalary": float(self.base_salary),
            "startDate": self.start_date.strftime("%Y-%m-%d"),
            "endDate": self.end_date.strftime("%Y-%m-%d") if self.end_date else None,
            "department": self.department,
            "salaryHistory": [
                {"salary": float(h.salary), "effectiveDate": h.effective_date.strftime("%Y-%m-%d")}
                for h in self.salary_history
            ],
            "entries": [e.to_dict() for e in self.entries],
        }
