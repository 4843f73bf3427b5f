"""Rate resolution: which salary and department hours apply on a given day.

Full rebuilds resolve as of the first day of each month while single-day and
mass edits resolve as of the exact day. Both rules are intentional.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import AbstractSet, Iterable, Optional, TypeVar

from ..core.exceptions import ComputationError
from ..departments.model import Department
from ..employees.model import Employee
from ..holidays.working_days import working_days_in_month
from .calculator.base import HourlyRateCalculator
from .calculator.standard_calculator import StandardHourlyRateCalculator

T = TypeVar("T")


@dataclass(frozen=True)
class RateContext:
    salary: Decimal
    department_hours: Decimal
    working_days: int
    hourly_rate: Decimal


def resolve_as_of(history: Iterable[tuple[T, date]], as_of: date, fallback: T) -> T:
    """Return the value whose effective date is the latest one on or before ``as_of``.

    Ties on effective date go to the most recently appended value. When no
    entry qualifies the cached ``fallback`` is returned; this happens for an
    employee whose start month begins before the first effective date.
    """
    found = False
    chosen = fallback
    for value, effective_date in sorted(history, key=lambda pair: pair[1]):
        if effective_date > as_of:
            break
        chosen = value
        found = True
    return chosen if found else fallback


def resolve_salary(employee: Employee, as_of: date) -> Decimal:
    return resolve_as_of(
        ((h.salary, h.effective_date) for h in employee.salary_history),
        as_of,
        employee.base_salary,
    )


def resolve_department_hours(department: Department, as_of: date) -> Decimal:
    return resolve_as_of(
        ((h.hours, h.effective_date) for h in department.hours_history),
        as_of,
        department.hours,
    )


def resolve_rate(
    employee: Employee,
    department: Department,
    holidays: AbstractSet[date],
    *,
    as_of: date,
    calculator: Optional[HourlyRateCalculator] = None,
) -> RateContext:
    """Resolve salary/hours as of ``as_of`` and price an hour of ``as_of``'s month."""
    calculator = calculator or StandardHourlyRateCalculator()
    salary = resolve_salary(employee, as_of)
    department_hours = resolve_department_hours(department, as_of)
    working_days = working_days_in_month(as_of.year, as_of.month, holidays)
    try:
        hourly_rate = calculator.hourly_rate(
            salary=salary,
            department_hours=department_hours,
            working_days=working_days,
        )
    except ComputationError as e:
        raise ComputationError(f"{employee.name} {as_of:%Y-%m}: {e}") from e
    return RateContext(
        salary=salary,
        department_hours=department_hours,
        working_days=working_days,
        hourly_rate=hourly_rate,
    )
