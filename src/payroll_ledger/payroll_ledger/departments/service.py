from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_between, require_max_length, require_non_empty, require_not_future
from ..core.constants import AMOUNT_PLACES, MAX_DEPARTMENT_HOURS, MAX_NAME_LENGTH, MIN_DEPARTMENT_HOURS
from ..core.exceptions import ConflictError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.rebuilder import LedgerRebuilder
from .model import Department, HoursChange
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments and their working-hours history."""

    def __init__(self, departments: DepartmentRepository, employees: EmployeeRepository, rebuilder: LedgerRebuilder):
        self._departments = departments
        self._employees = employees
        self._rebuilder = rebuilder

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get_department(self, name: str) -> Department:
        department = self._departments.get_by_name(name)
        if not department:
            raise NotFoundError(f"Department {name} not found")
        return department

    @staticmethod
    def _require_hours(hours: Any) -> Decimal:
        return require_between(hours, "Hours", MIN_DEPARTMENT_HOURS, MAX_DEPARTMENT_HOURS, places=AMOUNT_PLACES)

    def create_department(self, *, name: str, hours: Any, today: Optional[date] = None) -> Department:
        today = today or today_local()
        name = require_max_length(require_non_empty(name, "Department name"), "Department name", MAX_NAME_LENGTH)
        hours = self._require_hours(hours)

        if self._departments.get_by_name(name):
            raise ConflictError(f"Department {name} already exists")

        department = Department(
            name=name,
            hours=hours,
            hours_history=(HoursChange(hours=hours, effective_date=today),),
        )
        self._departments.create(department)
        logger.info("Created department %s (%s h/day)", name, hours)
        return department

    def change_hours(
        self,
        *,
        name: str,
        hours: Any,
        effective_date: date,
        today: Optional[date] = None,
    ) -> Department:
        """Append an hours change and re-price every employee of the department."""
        today = today or today_local()
        hours = self._require_hours(hours)
        require_not_future(effective_date, "Effective date", today)

        department = self.get_department(name)
        if department.hours == hours:
            raise ConflictError("New hours must be different from current hours")

        department = department.with_hours_change(hours, effective_date)
        rebuilt = self._rebuilder.rebuild_many(
            self._employees.list_by_department(name),
            {name: department},
            today=today,
        )

        department = self._rebuilder.save_all(rebuilt, department=department).department
        logger.info(
            "Department %s hours -> %s effective %s (%d employees rebuilt)",
            name,
            hours,
            effective_date,
            len(rebuilt),
        )
        return department

    def delete_department(self, *, name: str) -> None:
        self.get_department(name)
        if self._employees.list_by_department(name):
            raise ConflictError("Cannot delete department with assigned employees")
        self._departments.delete(name)
        logger.info("Deleted department %s", name)
