"""Ledger recalculation engine.

Rebuilds an employee's whole entry ledger from their salary history, their
department's hours history and the holiday calendar. The engine does no I/O;
``today`` is an explicit input so that a rebuild is reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import AbstractSet, Optional

from ..common.datetime_utils import day_name, days_in_month, iter_month_starts
from ..common.formatting import quantize_money
from ..departments.model import Department
from ..employees.model import Employee
from ..entries.model import Entry
from ..entries.strategies.base import WorkTypeStrategy
from ..entries.strategies.full_day_strategy import FullDayWorkType
from ..holidays.working_days import is_working_day
from .calculator.base import HourlyRateCalculator
from .rates import RateContext, resolve_rate

logger = logging.getLogger(__name__)


def price_entry(
    *,
    entry_id: int,
    work_date: date,
    work_type: WorkTypeStrategy,
    rate: RateContext,
    raw_inputs: Optional[tuple[str, str, Decimal]] = None,
) -> Entry:
    result = work_type.evaluate(rate.department_hours)
    start_time, end_time, hours_input = raw_inputs or work_type.raw_inputs()
    return Entry(
        entry_id=entry_id,
        work_date=work_date,
        day=day_name(work_date),
        hours=result.hours,
        pay=quantize_money(result.hours * rate.hourly_rate),
        work_type=work_type,
        start_time=start_time,
        end_time=end_time,
        hours_input=hours_input,
    )


def ledger_end(employee: Employee, today: date) -> date:
    """Last day that may carry an entry: termination date or today, whichever is first."""
    if employee.end_date is None:
        return today
    return min(employee.end_date, today)


def rebuild_entries(
    employee: Employee,
    department: Department,
    holidays: AbstractSet[date],
    *,
    today: date,
    calculator: Optional[HourlyRateCalculator] = None,
) -> tuple[Entry, ...]:
    """Regenerate every entry from the start month up to ``ledger_end``.

    Existing declarations keep their id and work type and are re-priced; new
    days become FULL_DAY entries with ids continuing after the highest id of
    the current ledger.
    """
    limit = ledger_end(employee, today)

    existing: dict[date, Entry] = {}
    for entry in employee.entries:
        existing.setdefault(entry.work_date, entry)
    next_id = employee.next_entry_id()

    out: list[Entry] = []
    for month in iter_month_starts(employee.start_date, limit):
        rate = resolve_rate(employee, department, holidays, as_of=month, calculator=calculator)

        last_day = days_in_month(month.year, month.month)
        if (month.year, month.month) == (limit.year, limit.month):
            last_day = limit.day

        for day in range(1, last_day + 1):
            work_date = month.replace(day=day)
            if work_date < employee.start_date or not is_working_day(work_date, holidays):
                continue

            prior = existing.get(work_date)
            if prior is not None:
                out.append(
                    price_entry(
                        entry_id=prior.entry_id,
                        work_date=work_date,
                        work_type=prior.work_type,
                        rate=rate,
                        raw_inputs=(prior.start_time, prior.end_time, prior.hours_input),
                    )
                )
            else:
                out.append(price_entry(entry_id=next_id, work_date=work_date, work_type=FullDayWorkType(), rate=rate))
                next_id += 1

    logger.debug("Rebuilt %d entries for %s (through %s)", len(out), employee.name, limit)
    return tuple(out)


def rebuild_employee(
    employee: Employee,
    department: Department,
    holidays: AbstractSet[date],
    *,
    today: date,
    calculator: Optional[HourlyRateCalculator] = None,
) -> Employee:
    entries = rebuild_entries(employee, department, holidays, today=today, calculator=calculator)
    return replace(employee, entries=entries)
