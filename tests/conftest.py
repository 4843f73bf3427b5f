from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.payroll_ledger.payroll_ledger.container import Container, assemble_container
from src.payroll_ledger.payroll_ledger.core.exceptions import ConcurrencyError, ConflictError
from src.payroll_ledger.payroll_ledger.departments.model import Department, HoursChange
from src.payroll_ledger.payroll_ledger.employees.model import Employee, SalaryChange
from src.payroll_ledger.payroll_ledger.holidays.model import Holiday
from src.payroll_ledger.payroll_ledger.payroll.unit_of_work import CommittedChanges

TODAY = date(2024, 3, 15)


class InMemoryDepartments:
    def __init__(self):
        self._by_name: dict[str, Department] = {}

    def list_all(self):
        return [self._by_name[k] for k in sorted(self._by_name)]

    def get_by_name(self, name: str) -> Optional[Department]:
        return self._by_name.get(name)

    def create(self, department: Department) -> None:
        if department.name in self._by_name:
            raise ConflictError("Record already exists")
        self._by_name[department.name] = replace(department, version=0)

    def require_current(self, department: Department) -> None:
        stored = self._by_name.get(department.name)
        if not stored or stored.version != department.version:
            raise ConcurrencyError(f"Department {department.name} was modified concurrently")

    def save(self, department: Department) -> Department:
        self.require_current(department)
        saved = replace(department, version=department.version + 1)
        self._by_name[department.name] = saved
        return saved

    def delete(self, name: str) -> bool:
        return self._by_name.pop(name, None) is not None


class InMemoryEmployees:
    def __init__(self):
        self._by_name: dict[str, Employee] = {}

    def list_all(self):
        return [self._by_name[k] for k in sorted(self._by_name)]

    def list_by_department(self, department: str):
        return [e for e in self.list_all() if e.department == department]

    def get_by_name(self, name: str) -> Optional[Employee]:
        return self._by_name.get(name)

    def create(self, employee: Employee) -> None:
        if employee.name in self._by_name:
            raise ConflictError("Record already exists")
        self._by_name[employee.name] = replace(employee, version=0)

    def require_current(self, employee: Employee) -> None:
        stored = self._by_name.get(employee.name)
        if not stored or stored.version != employee.version:
            raise ConcurrencyError(f"Employee {employee.name} was modified concurrently")

    def save(self, employee: Employee) -> Employee:
        self.require_current(employee)
        saved = replace(employee, version=employee.version + 1)
        self._by_name[employee.name] = saved
        return saved


class InMemoryHolidays:
    def __init__(self):
        self._dates: set[date] = set()

    def list_all(self):
        return [Holiday(holiday_date=d) for d in sorted(self._dates)]

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        return Holiday(holiday_date=holiday_date) if holiday_date in self._dates else None

    def create(self, holiday: Holiday) -> None:
        if holiday.holiday_date in self._dates:
            raise ConflictError("Record already exists")
        self._dates.add(holiday.holiday_date)


class InMemoryLedgerUnitOfWork:
    """Checks every record before writing any, like a rolled-back transaction."""

    def __init__(self, departments: InMemoryDepartments, employees: InMemoryEmployees, holidays: InMemoryHolidays):
        self._departments = departments
        self._employees = employees
        self._holidays = holidays

    def commit(self, *, employees=(), department=None, holiday=None) -> CommittedChanges:
        if holiday is not None and self._holidays.get_by_date(holiday.holiday_date):
            raise ConflictError("Record already exists")
        if department is not None:
            self._departments.require_current(department)
        for employee in employees:
            self._employees.require_current(employee)

        if holiday is not None:
            self._holidays.create(holiday)
        saved_department = self._departments.save(department) if department is not None else None
        saved = [self._employees.save(e) for e in employees]
        return CommittedChanges(employees=saved, department=saved_department)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def eng() -> Department:
    return Department(
        name="Eng",
        hours=Decimal(8),
        hours_history=(HoursChange(hours=Decimal(8), effective_date=date(2023, 1, 1)),),
    )


@pytest.fixture
def alice() -> Employee:
    return Employee(
        name="Alice",
        base_salary=Decimal(3000),
        start_date=date(2024, 1, 2),
        department="Eng",
        salary_history=(SalaryChange(salary=Decimal(3000), effective_date=date(2024, 1, 2)),),
    )


@pytest.fixture
def container() -> Container:
    departments, employees, holidays = InMemoryDepartments(), InMemoryEmployees(), InMemoryHolidays()
    return assemble_container(
        departments_repo=departments,
        employees_repo=employees,
        holidays_repo=holidays,
        unit_of_work=InMemoryLedgerUnitOfWork(departments, employees, holidays),
    )
