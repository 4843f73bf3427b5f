from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class HourlyRateCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def hourly_rate(self, *, salary: Decimal, department_hours: Decimal, working_days: int) -> Decimal:
        raise NotImplementedError
