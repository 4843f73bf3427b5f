from __future__ import annotations

from dataclasses import replace
from datetime import date, time, timedelta
from decimal import Decimal

import pytest

from src.payroll_ledger.payroll_ledger.core.exceptions import ComputationError
from src.payroll_ledger.payroll_ledger.employees.model import Employee, SalaryChange
from src.payroll_ledger.payroll_ledger.entries.strategies.custom_range_strategy import CustomRangeWorkType
from src.payroll_ledger.payroll_ledger.entries.strategies.half_day_strategy import HalfDayWorkType
from src.payroll_ledger.payroll_ledger.holidays.working_days import is_working_day
from src.payroll_ledger.payroll_ledger.payroll.engine import rebuild_employee, rebuild_entries
from src.payroll_ledger.payroll_ledger.payroll.mutators import upsert_single_entry


def _dates(entries):
    return [e.work_date for e in entries]


def test_first_entry_matches_worked_example(alice, eng):
    entries = rebuild_entries(alice, eng, frozenset(), today=date(2024, 1, 31))

    first = entries[0]
    assert first.entry_id == 0
    assert first.work_date == date(2024, 1, 2)
    assert first.day == "Tuesday"
    assert first.hours == Decimal(8)
    assert first.pay == Decimal("111.11")
    assert first.label == "FULL_DAY"
    # Jan 1 is before the start date; 27 Mon-Sat days minus that one.
    assert len(entries) == 26


def test_rebuild_is_deterministic(alice, eng, today):
    holidays = frozenset({date(2024, 2, 14)})
    first = rebuild_entries(alice, eng, holidays, today=today)
    second = rebuild_entries(replace(alice, entries=first), eng, holidays, today=today)
    third = rebuild_entries(replace(alice, entries=second), eng, holidays, today=today)

    assert first == second == third


def test_coverage_and_no_duplicate_dates(alice, eng, today):
    holidays = frozenset({date(2024, 2, 14), date(2024, 3, 8)})
    entries = rebuild_entries(alice, eng, holidays, today=today)

    dates = _dates(entries)
    assert len(dates) == len(set(dates))
    assert dates == sorted(dates)

    expected = []
    d = alice.start_date
    while d <= today:
        if is_working_day(d, holidays):
            expected.append(d)
        d += timedelta(days=1)
    assert dates == expected
    assert date(2024, 1, 7) not in dates
    assert date(2024, 2, 14) not in dates


def test_terminated_employee_stops_at_end_date(alice, eng, today):
    ended = replace(alice, end_date=date(2024, 2, 10))
    entries = rebuild_entries(ended, eng, frozenset(), today=today)

    assert entries[-1].work_date == date(2024, 2, 10)
    assert all(e.work_date <= date(2024, 2, 10) for e in entries)


def test_new_holiday_removes_entry_and_changes_divisor(alice, eng):
    today = date(2024, 1, 31)
    before = rebuild_entries(alice, eng, frozenset(), today=today)
    after = rebuild_entries(replace(alice, entries=before), eng, frozenset({date(2024, 1, 2)}), today=today)

    assert date(2024, 1, 2) not in _dates(after)
    jan3 = after[0]
    assert jan3.work_date == date(2024, 1, 3)
    assert jan3.entry_id == 1
    # 3000 / (8 h * 26 days) * 8 h
    assert jan3.pay == Decimal("115.38")


def test_new_days_continue_after_highest_existing_id(alice, eng):
    seed = rebuild_entries(alice, eng, frozenset(), today=date(2024, 1, 3))
    kept = replace(seed[1], entry_id=5)
    entries = rebuild_entries(replace(alice, entries=(kept,)), eng, frozenset(), today=date(2024, 1, 4))

    assert [(e.work_date.day, e.entry_id) for e in entries] == [(2, 6), (3, 5), (4, 7)]


def test_edited_entry_keeps_id_and_work_type_across_rebuild(alice, eng):
    today = date(2024, 1, 31)
    built = rebuild_employee(alice, eng, frozenset(), today=today)
    original_id = built.entry_for(date(2024, 1, 3)).entry_id

    edited = upsert_single_entry(
        built, eng, frozenset(), work_date=date(2024, 1, 3), work_type=HalfDayWorkType(), today=today
    )
    rebuilt = rebuild_employee(edited, eng, frozenset(), today=today)

    entry = rebuilt.entry_for(date(2024, 1, 3))
    assert entry.entry_id == original_id
    assert entry.label == "HALF_DAY"
    assert entry.hours == Decimal(4)
    assert entry.pay == Decimal("55.56")


def test_custom_range_is_repriced_from_its_raw_times(alice, eng):
    today = date(2024, 1, 31)
    built = rebuild_employee(alice, eng, frozenset(), today=today)
    edited = upsert_single_entry(
        built,
        eng,
        frozenset(),
        work_date=date(2024, 1, 3),
        work_type=CustomRangeWorkType(start=time(9, 0), end=time(13, 30)),
        today=today,
    )

    rebuilt = rebuild_employee(edited, eng, frozenset({date(2024, 1, 2)}), today=today)

    entry = rebuilt.entry_for(date(2024, 1, 3))
    assert entry.label == "09:00-13:30"
    assert entry.hours == Decimal("4.5")
    assert (entry.start_time, entry.end_time) == ("09:00", "13:30")
    # 3000 / (8 * 26) * 4.5
    assert entry.pay == Decimal("64.90")


def test_hours_increase_reprices_from_effective_month_only(alice, eng):
    longer = eng.with_hours_change(Decimal(10), date(2024, 2, 1))
    entries = rebuild_entries(alice, longer, frozenset(), today=date(2024, 2, 29))

    january = [e for e in entries if e.work_date.month == 1]
    february = [e for e in entries if e.work_date.month == 2]
    assert all(e.hours == Decimal(8) and e.pay == Decimal("111.11") for e in january)
    # 3000 / (10 h * 25 days) = 12 per hour
    assert all(e.hours == Decimal(10) and e.pay == Decimal("120.00") for e in february)


def test_mid_month_change_applies_from_next_month_on_rebuild(alice, eng):
    longer = eng.with_hours_change(Decimal(10), date(2024, 2, 15))
    entries = rebuild_entries(alice, longer, frozenset(), today=date(2024, 3, 1))

    feb20 = next(e for e in entries if e.work_date == date(2024, 2, 20))
    mar1 = next(e for e in entries if e.work_date == date(2024, 3, 1))
    assert feb20.hours == Decimal(8)
    assert mar1.hours == Decimal(10)


def test_salary_change_applies_from_effective_month(eng):
    bob = Employee(
        name="Bob",
        base_salary=Decimal(2700),
        start_date=date(2024, 1, 1),
        department="Eng",
        salary_history=(SalaryChange(salary=Decimal(2700), effective_date=date(2024, 1, 1)),),
    )
    raised = bob.with_salary_change(Decimal(3000), date(2024, 2, 1))
    entries = rebuild_entries(raised, eng, frozenset(), today=date(2024, 2, 29))

    jan = next(e for e in entries if e.work_date == date(2024, 1, 2))
    feb = next(e for e in entries if e.work_date == date(2024, 2, 1))
    # 2700 / (8 * 27) * 8 = 100
    assert jan.pay == Decimal("100.00")
    # 3000 / (8 * 25) * 8 = 120
    assert feb.pay == Decimal("120.00")


def test_month_without_working_days_is_fatal(alice, eng):
    holidays = frozenset(date(2024, 1, d) for d in range(1, 32))

    with pytest.raises(ComputationError):
        rebuild_entries(alice, eng, holidays, today=date(2024, 1, 31))


def test_rebuild_employee_leaves_input_untouched(alice, eng):
    rebuilt = rebuild_employee(alice, eng, frozenset(), today=date(2024, 1, 5))

    assert alice.entries == ()
    assert _dates(rebuilt.entries) == [date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 4), date(2024, 1, 5)]
