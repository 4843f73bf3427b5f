from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .entries.factory import WorkTypeFactory
from .entries.service import EntryService
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .payroll.calculator.base import HourlyRateCalculator
from .payroll.mysql_unit_of_work import MySQLLedgerUnitOfWork
from .payroll.rebuilder import LedgerRebuilder
from .payroll.service import PayrollReportService
from .payroll.unit_of_work import LedgerUnitOfWork


@dataclass(frozen=True)
class Container:
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    holidays_repo: HolidayRepository

    department_service: DepartmentService
    employee_service: EmployeeService
    holiday_service: HolidayService
    entry_service: EntryService
    payroll_report_service: PayrollReportService


def assemble_container(
    *,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    holidays_repo: HolidayRepository,
    unit_of_work: LedgerUnitOfWork,
    calculator: Optional[HourlyRateCalculator] = None,
) -> Container:
    rebuilder = LedgerRebuilder(holidays_repo, unit_of_work, calculator=calculator)

    return Container(
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        holidays_repo=holidays_repo,
        department_service=DepartmentService(departments_repo, employees_repo, rebuilder),
        employee_service=EmployeeService(employees_repo, departments_repo, rebuilder),
        holiday_service=HolidayService(holidays_repo, employees_repo, departments_repo, rebuilder),
        entry_service=EntryService(employees_repo, departments_repo, rebuilder, calculator=calculator),
        payroll_report_service=PayrollReportService(employees_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    work_types = WorkTypeFactory()

    return assemble_container(
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn, work_types=work_types),
        holidays_repo=MySQLHolidayRepository(conn),
        unit_of_work=MySQLLedgerUnitOfWork(conn),
    )
