from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from ..departments.model import Department
from ..departments.mysql_department_repository import MySQLDepartmentRepository
from ..employees.model import Employee
from ..employees.mysql_employee_repository import MySQLEmployeeRepository
from ..holidays.model import Holiday
from ..holidays.mysql_holiday_repository import MySQLHolidayRepository
from .unit_of_work import CommittedChanges, LedgerUnitOfWork


class MySQLLedgerUnitOfWork(LedgerUnitOfWork):
    """All writes share one db_cursor, so any failure rolls the whole batch back."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def commit(
        self,
        *,
        employees: Sequence[Employee] = (),
        department: Optional[Department] = None,
        holiday: Optional[Holiday] = None,
    ) -> CommittedChanges:
        with db_cursor(self._conn_factory) as (_, cur):
            if holiday is not None:
                MySQLHolidayRepository.insert(cur, holiday)
            saved_department = None
            if department is not None:
                saved_department = MySQLDepartmentRepository.update(cur, department)
            saved = [MySQLEmployeeRepository.update(cur, e) for e in employees]
        return CommittedChanges(employees=saved, department=saved_department)
