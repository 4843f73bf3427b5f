from datetime import time
from decimal import Decimal

import pytest

from src.payroll_ledger.payroll_ledger.core.exceptions import ValidationError
from src.payroll_ledger.payroll_ledger.entries.factory import WorkTypeFactory
from src.payroll_ledger.payroll_ledger.entries.strategies.custom_hours_strategy import CustomHoursWorkType
from src.payroll_ledger.payroll_ledger.entries.strategies.custom_range_strategy import CustomRangeWorkType
from src.payroll_ledger.payroll_ledger.entries.strategies.full_day_strategy import FullDayWorkType
from src.payroll_ledger.payroll_ledger.entries.strategies.half_day_strategy import HalfDayWorkType
from src.payroll_ledger.payroll_ledger.entries.strategies.unrecognized_strategy import UnrecognizedWorkType


def test_full_and_half_day_follow_department_hours():
    factory = WorkTypeFactory()

    full = factory.for_request(work_type="FULL_DAY").evaluate(Decimal(7))
    half = factory.for_request(work_type="HALF_DAY").evaluate(Decimal(7))

    assert (full.hours, full.label) == (Decimal(7), "FULL_DAY")
    assert (half.hours, half.label) == (Decimal("3.5"), "HALF_DAY")


def test_custom_range_hours_and_label():
    strategy = WorkTypeFactory().for_request(work_type="CUSTOM", start_time="09:00", end_time="13:30")

    assert isinstance(strategy, CustomRangeWorkType)
    result = strategy.evaluate(Decimal(8))
    assert result.hours == Decimal("4.5")
    assert result.label == "09:00-13:30"
    assert strategy.raw_inputs() == ("09:00", "13:30", Decimal(0))


@pytest.mark.parametrize(
    "start, end",
    [("09:00", None), (None, "17:00"), ("", ""), ("9am", "17:00"), ("14:00", "13:00")],
)
def test_custom_range_requires_valid_times(start, end):
    with pytest.raises(ValidationError):
        WorkTypeFactory().for_request(work_type="CUSTOM", start_time=start, end_time=end)


@pytest.mark.parametrize("hours, label", [(5, "HOURS_5"), ("4.5", "HOURS_4.5"), (0, "HOURS_0"), ("24.00", "HOURS_24")])
def test_custom_hours_label(hours, label):
    strategy = WorkTypeFactory().for_request(work_type="CUSTOM_HOURS", hours=hours)

    assert isinstance(strategy, CustomHoursWorkType)
    assert strategy.label == label
    assert strategy.evaluate(Decimal(8)).hours == Decimal(str(hours))


@pytest.mark.parametrize("hours", [None, -0.5, 24.5])
def test_custom_hours_out_of_range(hours):
    with pytest.raises(ValidationError):
        WorkTypeFactory().for_request(work_type="CUSTOM_HOURS", hours=hours)


def test_unknown_tag_is_kept_and_worth_nothing():
    strategy = WorkTypeFactory().for_request(work_type="OVERTIME")

    assert isinstance(strategy, UnrecognizedWorkType)
    assert strategy.evaluate(Decimal(8)).hours == Decimal(0)
    assert strategy.label == "OVERTIME"


@pytest.mark.parametrize("hours", ["4.333", "1.00000000000000000000000001"])
def test_custom_hours_beyond_two_decimals_rejected(hours):
    with pytest.raises(ValidationError):
        WorkTypeFactory().for_request(work_type="CUSTOM_HOURS", hours=hours)


def test_unknown_tag_longer_than_storage_is_rejected():
    assert WorkTypeFactory().for_request(work_type="X" * 20).label == "X" * 20
    with pytest.raises(ValidationError):
        WorkTypeFactory().for_request(work_type="X" * 21)


def test_missing_tag_is_rejected():
    with pytest.raises(ValidationError):
        WorkTypeFactory().for_request(work_type=None)


def test_stored_declarations_are_restored():
    factory = WorkTypeFactory()

    assert factory.for_stored(work_type="FULL_DAY") == FullDayWorkType()
    assert factory.for_stored(work_type="HALF_DAY") == HalfDayWorkType()
    assert factory.for_stored(work_type="CUSTOM", start_time="08:15", end_time="12:45") == CustomRangeWorkType(
        start=time(8, 15), end=time(12, 45)
    )
    assert factory.for_stored(work_type="CUSTOM_HOURS", hours_input=Decimal("6.00")).label == "HOURS_6"
    assert factory.for_stored(work_type="LEGACY").label == "LEGACY"
