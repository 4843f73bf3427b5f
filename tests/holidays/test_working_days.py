from datetime import date

from src.payroll_ledger.payroll_ledger.holidays.working_days import (
    is_regular_day,
    is_working_day,
    working_days_in_month,
)


def test_january_2024_has_27_mon_to_sat_days():
    assert working_days_in_month(2024, 1, frozenset()) == 27


def test_leap_february_2024():
    assert working_days_in_month(2024, 2, frozenset()) == 25


def test_holiday_on_weekday_reduces_count():
    assert working_days_in_month(2024, 1, frozenset({date(2024, 1, 2)})) == 26


def test_holiday_on_sunday_does_not_change_count():
    assert working_days_in_month(2024, 1, frozenset({date(2024, 1, 7)})) == 27


def test_holidays_of_other_months_are_ignored():
    assert working_days_in_month(2024, 1, frozenset({date(2024, 2, 1)})) == 27


def test_sunday_is_not_a_regular_day():
    assert not is_regular_day(date(2024, 1, 7))
    assert is_regular_day(date(2024, 1, 6))


def test_holiday_is_not_a_working_day():
    holidays = frozenset({date(2024, 1, 3)})
    assert not is_working_day(date(2024, 1, 3), holidays)
    assert is_working_day(date(2024, 1, 4), holidays)
