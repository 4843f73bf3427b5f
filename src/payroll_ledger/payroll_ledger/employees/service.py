from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_between, require_max_length, require_non_empty, require_not_future
from ..core.constants import AMOUNT_PLACES, MAX_BASE_SALARY, MAX_NAME_LENGTH, MIN_BASE_SALARY
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..departments.model import Department
from ..departments.repository import DepartmentRepository
from ..payroll.rebuilder import LedgerRebuilder
from .model import Employee, SalaryChange
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: hire, transfer, terminate and re-salary employees.

    Every mutation ends with a full ledger rebuild.
    """

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository, rebuilder: LedgerRebuilder):
        self._employees = employees
        self._departments = departments
        self._rebuilder = rebuilder

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, name: str) -> Employee:
        employee = self._employees.get_by_name(name)
        if not employee:
            raise NotFoundError(f"Employee {name} not found")
        return employee

    def _get_department(self, name: str) -> Department:
        department = self._departments.get_by_name(name)
        if not department:
            raise NotFoundError(f"Department {name} does not exist")
        return department

    @staticmethod
    def _require_salary(salary: Any) -> Decimal:
        return require_between(salary, "Salary", MIN_BASE_SALARY, MAX_BASE_SALARY, places=AMOUNT_PLACES)

    def create_employee(
        self,
        *,
        name: str,
        base_salary: Any,
        start_date: date,
        department: str,
        today: Optional[date] = None,
    ) -> Employee:
        today = today or today_local()
        name = require_max_length(require_non_empty(name, "Employee name"), "Employee name", MAX_NAME_LENGTH)
        base_salary = self._require_salary(base_salary)
        require_not_future(start_date, "Start date", today)
        department = require_non_empty(department, "Department")

        if self._employees.get_by_name(name):
            raise ConflictError("Employee name must be unique")
        dept = self._get_department(department)

        employee = Employee(
            name=name,
            base_salary=base_salary,
            start_date=start_date,
            department=dept.name,
            salary_history=(SalaryChange(salary=base_salary, effective_date=start_date),),
        )
        employee = self._rebuilder.rebuild(employee, dept, today=today)
        self._employees.create(employee)
        logger.info("Created employee %s in %s with %d entries", name, dept.name, len(employee.entries))
        return employee

    def transfer(self, *, name: str, department: str, today: Optional[date] = None) -> Employee:
        today = today or today_local()
        department = require_non_empty(department, "Department")

        employee = self.get_employee(name)
        if employee.department == department:
            raise ConflictError("Employee is already in this department")
        dept = self._get_department(department)

        employee = self._rebuilder.rebuild(replace(employee, department=dept.name), dept, today=today)
        employee = self._employees.save(employee)
        logger.info("Transferred %s to %s", name, dept.name)
        return employee

    def terminate(self, *, name: str, end_date: date, today: Optional[date] = None) -> Employee:
        today = today or today_local()
        require_not_future(end_date, "End date", today)

        employee = self.get_employee(name)
        if end_date < employee.start_date:
            raise ValidationError("End date must be after start date")
        if not employee.is_active:
            raise ConflictError("Employee is already inactive")

        dept = self._get_department(employee.department)
        employee = self._rebuilder.rebuild(replace(employee, end_date=end_date), dept, today=today)
        employee = self._employees.save(employee)
        logger.info("Marked %s inactive as of %s", name, end_date)
        return employee

    def change_salary(
        self,
        *,
        name: str,
        salary: Any,
        effective_date: date,
        today: Optional[date] = None,
    ) -> Employee:
        today = today or today_local()
        salary = self._require_salary(salary)
        require_not_future(effective_date, "Effective date", today)

        employee = self.get_employee(name)
        if employee.base_salary == salary:
            raise ConflictError("New salary must be different from current salary")

        dept = self._get_department(employee.department)
        employee = self._rebuilder.rebuild(employee.with_salary_change(salary, effective_date), dept, today=today)
        employee = self._employees.save(employee)
        logger.info("Salary of %s -> %s effective %s", name, salary, effective_date)
        return employee
