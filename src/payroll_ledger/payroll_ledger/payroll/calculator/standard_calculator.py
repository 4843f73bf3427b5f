from __future__ import annotations

from decimal import Decimal

from ...core.exceptions import ComputationError
from .base import HourlyRateCalculator


class StandardHourlyRateCalculator(HourlyRateCalculator):
    """Standard rule: monthly salary spread over every working hour of the month."""

    def hourly_rate(self, *, salary: Decimal, department_hours: Decimal, working_days: int) -> Decimal:
        if working_days <= 0:
            raise ComputationError("Month has no working days; hourly rate is undefined")
        if department_hours <= 0:
            raise ComputationError("Department hours must be positive to compute an hourly rate")
        return Decimal(salary) / (Decimal(department_hours) * working_days)
