from __future__ import annotations

import logging
from datetime import date
from typing import AbstractSet, Iterable, Mapping, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..departments.model import Department
from ..employees.model import Employee
from ..holidays.model import Holiday, holiday_dates
from ..holidays.repository import HolidayRepository
from .calculator.base import HourlyRateCalculator
from .engine import rebuild_employee
from .unit_of_work import CommittedChanges, LedgerUnitOfWork

logger = logging.getLogger(__name__)


class LedgerRebuilder:
    """Recompute employee ledgers, then persist them.

    Every ledger of a batch is computed before anything is written, and the
    batch is written in one transaction, so a ComputationError or a
    concurrent edit leaves all stored ledgers untouched.
    """

    def __init__(
        self,
        holidays: HolidayRepository,
        unit_of_work: LedgerUnitOfWork,
        *,
        calculator: Optional[HourlyRateCalculator] = None,
    ):
        self._holidays = holidays
        self._unit_of_work = unit_of_work
        self._calculator = calculator

    def holiday_set(self) -> AbstractSet[date]:
        return holiday_dates(self._holidays.list_all())

    def rebuild(
        self,
        employee: Employee,
        department: Department,
        *,
        today: date,
        holidays: Optional[AbstractSet[date]] = None,
    ) -> Employee:
        if holidays is None:
            holidays = self.holiday_set()
        return rebuild_employee(employee, department, holidays, today=today, calculator=self._calculator)

    def rebuild_many(
        self,
        employees: Iterable[Employee],
        departments: Mapping[str, Department],
        *,
        today: date,
        holidays: Optional[AbstractSet[date]] = None,
    ) -> list[Employee]:
        if holidays is None:
            holidays = self.holiday_set()

        out: list[Employee] = []
        for employee in employees:
            department = departments.get(employee.department)
            if department is None:
                raise NotFoundError(f"Department {employee.department} not found for {employee.name}")
            out.append(self.rebuild(employee, department, today=today, holidays=holidays))
        return out

    def save_all(
        self,
        employees: Sequence[Employee],
        *,
        department: Optional[Department] = None,
        holiday: Optional[Holiday] = None,
    ) -> CommittedChanges:
        """Write the rebuilt ledgers, and the change that caused them, in one transaction."""
        committed = self._unit_of_work.commit(employees=employees, department=department, holiday=holiday)
        if committed.employees:
            logger.info("Saved %d rebuilt ledgers", len(committed.employees))
        return committed
