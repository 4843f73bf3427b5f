from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import today_local
from ..core.exceptions import NotFoundError
from ..departments.repository import DepartmentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import HourlyRateCalculator
from ..payroll.mutators import upsert_mass_entries, upsert_single_entry
from ..payroll.rebuilder import LedgerRebuilder
from .factory import WorkTypeFactory

logger = logging.getLogger(__name__)


class EntryService:
    """Use case: edit one day of the ledger, for one employee or a whole department."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        rebuilder: LedgerRebuilder,
        *,
        work_types: Optional[WorkTypeFactory] = None,
        calculator: Optional[HourlyRateCalculator] = None,
    ):
        self._employees = employees
        self._departments = departments
        self._rebuilder = rebuilder
        self._work_types = work_types or WorkTypeFactory()
        self._calculator = calculator

    def upsert_entry(
        self,
        *,
        employee_name: str,
        work_date: date,
        work_type: Optional[str],
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        hours: Any = None,
        today: Optional[date] = None,
    ) -> Employee:
        today = today or today_local()
        strategy = self._work_types.for_request(
            work_type=work_type,
            start_time=start_time,
            end_time=end_time,
            hours=hours,
        )

        employee = self._employees.get_by_name(employee_name)
        if not employee:
            raise NotFoundError(f"Employee {employee_name} not found")
        department = self._departments.get_by_name(employee.department)
        if not department:
            raise NotFoundError(f"Department {employee.department} not found")

        employee = upsert_single_entry(
            employee,
            department,
            self._rebuilder.holiday_set(),
            work_date=work_date,
            work_type=strategy,
            today=today,
            calculator=self._calculator,
        )
        employee = self._employees.save(employee)
        logger.info("Entry %s for %s set to %s", work_date, employee_name, strategy.label)
        return employee

    def mass_upsert(
        self,
        *,
        department: str,
        work_date: date,
        hours: Any,
        today: Optional[date] = None,
    ) -> list[Employee]:
        today = today or today_local()
        dept = self._departments.get_by_name(department)
        if not dept:
            raise NotFoundError(f"Department {department} not found")

        updated = upsert_mass_entries(
            dept,
            self._employees.list_by_department(department),
            self._rebuilder.holiday_set(),
            work_date=work_date,
            hours=hours,
            today=today,
            calculator=self._calculator,
        )
        saved = self._rebuilder.save_all(updated).employees
        logger.info("Mass entry %s for %s: %d employees", work_date, department, len(saved))
        return saved
