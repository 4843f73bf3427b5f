"""Single-day ledger edits that patch one date without a full rebuild."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import AbstractSet, Any, Optional, Sequence

from ..common.validators import require_between, require_not_future
from ..core.constants import AMOUNT_PLACES, MAX_CUSTOM_HOURS
from ..core.exceptions import ConflictError, ValidationError
from ..departments.model import Department
from ..employees.model import Employee
from ..entries.strategies.base import WorkTypeStrategy
from ..entries.strategies.custom_hours_strategy import CustomHoursWorkType
from ..holidays.working_days import is_regular_day
from .calculator.base import HourlyRateCalculator
from .engine import price_entry
from .rates import resolve_rate


def _require_working_day(work_date: date, holidays: AbstractSet[date]) -> None:
    if work_date in holidays:
        raise ConflictError(f"{work_date:%Y-%m-%d} is a holiday")
    if not is_regular_day(work_date):
        raise ConflictError(f"{work_date:%Y-%m-%d} is not a regular working day")


def _apply_entry(
    employee: Employee,
    department: Department,
    holidays: AbstractSet[date],
    *,
    work_date: date,
    work_type: WorkTypeStrategy,
    calculator: Optional[HourlyRateCalculator],
) -> Employee:
    # Exact-date resolution, unlike the month-start rule of a full rebuild.
    rate = resolve_rate(employee, department, holidays, as_of=work_date, calculator=calculator)

    prior = employee.entry_for(work_date)
    entry_id = prior.entry_id if prior else employee.next_entry_id()
    entry = price_entry(entry_id=entry_id, work_date=work_date, work_type=work_type, rate=rate)

    entries = [e for e in employee.entries if e.work_date != work_date]
    entries.append(entry)
    entries.sort(key=lambda e: e.work_date)
    return replace(employee, entries=tuple(entries))


def upsert_single_entry(
    employee: Employee,
    department: Department,
    holidays: AbstractSet[date],
    *,
    work_date: date,
    work_type: WorkTypeStrategy,
    today: date,
    calculator: Optional[HourlyRateCalculator] = None,
) -> Employee:
    """Replace (keeping its id) or insert the entry for ``work_date``."""
    require_not_future(work_date, "Entry date", today)
    if not employee.is_active_on(work_date):
        raise ValidationError(f"{employee.name} is not employed on {work_date:%Y-%m-%d}")
    _require_working_day(work_date, holidays)

    return _apply_entry(
        employee,
        department,
        holidays,
        work_date=work_date,
        work_type=work_type,
        calculator=calculator,
    )


def upsert_mass_entries(
    department: Department,
    employees: Sequence[Employee],
    holidays: AbstractSet[date],
    *,
    work_date: date,
    hours: Any,
    today: date,
    calculator: Optional[HourlyRateCalculator] = None,
) -> list[Employee]:
    """Set ``hours`` on ``work_date`` for every employee active in the department.

    The entry is always a CUSTOM_HOURS declaration, even when ``hours`` equals a
    full or half day. Nothing is returned unless every employee succeeds.
    """
    hours = require_between(hours, "Hours", 0, MAX_CUSTOM_HOURS, places=AMOUNT_PLACES)
    require_not_future(work_date, "Entry date", today)
    _require_working_day(work_date, holidays)

    active = [e for e in employees if e.department == department.name and e.is_active_on(work_date)]
    if not active:
        raise ConflictError(f"No active employees in {department.name} on {work_date:%Y-%m-%d}")

    work_type = CustomHoursWorkType(hours=Decimal(hours))
    return [
        _apply_entry(
            employee,
            department,
            holidays,
            work_date=work_date,
            work_type=work_type,
            calculator=calculator,
        )
        for employee in active
    ]
