from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.exceptions import ConcurrencyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from ..entries.factory import WorkTypeFactory
from ..entries.model import Entry
from .model import Employee, SalaryChange
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = "name, base_salary, start_date, end_date, dept_name, version"


class MySQLEmployeeRepository(EmployeeRepository):
    """Stores an employee aggregate across three tables, always in one transaction."""

    def __init__(self, conn_factory: DatabaseConnection, *, work_types: Optional[WorkTypeFactory] = None):
        self._conn_factory = conn_factory
        self._work_types = work_types or WorkTypeFactory()

    def _load(self, cur, row: dict) -> Employee:
        name = row["name"]
        cur.execute(
            """
            SELECT salary, effective_date
            FROM employee_salary_history
            WHERE employee_name=%s
            ORDER BY effective_date, history_id
            """,
            (name,),
        )
        salary_history = tuple(
            SalaryChange(salary=to_decimal(r["salary"]), effective_date=r["effective_date"])
            for r in fetchall(cur)
        )

        cur.execute(
            """
            SELECT entry_id, work_date, day_name, hours, pay, work_type, start_time, end_time, hours_input
            FROM employee_entries
            WHERE employee_name=%s
            ORDER BY work_date
            """,
            (name,),
        )
        entries = tuple(
            Entry(
                entry_id=int(r["entry_id"]),
                work_date=r["work_date"],
                day=r["day_name"],
                hours=to_decimal(r["hours"]),
                pay=to_decimal(r["pay"]),
                work_type=self._work_types.for_stored(
                    work_type=r["work_type"],
                    start_time=r.get("start_time") or "",
                    end_time=r.get("end_time") or "",
                    hours_input=to_decimal(r.get("hours_input")),
                ),
                start_time=r.get("start_time") or "",
                end_time=r.get("end_time") or "",
                hours_input=to_decimal(r.get("hours_input")),
            )
            for r in fetchall(cur)
        )

        return Employee(
            name=name,
            base_salary=to_decimal(row["base_salary"]),
            start_date=row["start_date"],
            end_date=row.get("end_date"),
            department=row["dept_name"],
            salary_history=salary_history,
            entries=entries,
            version=int(row["version"]),
        )

    @staticmethod
    def _write_children(cur, employee: Employee) -> None:
        cur.execute("DELETE FROM employee_salary_history WHERE employee_name=%s", (employee.name,))
        cur.executemany(
            "INSERT INTO employee_salary_history(employee_name, salary, effective_date) VALUES(%s,%s,%s)",
            [(employee.name, h.salary, h.effective_date) for h in employee.salary_history],
        )

        cur.execute("DELETE FROM employee_entries WHERE employee_name=%s", (employee.name,))
        cur.executemany(
            """
            INSERT INTO employee_entries(
                employee_name, entry_id, work_date, day_name, hours, pay,
                work_type, work_type_label, start_time, end_time, hours_input
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            [
                (
                    employee.name,
                    e.entry_id,
                    e.work_date,
                    e.day,
                    e.hours,
                    e.pay,
                    e.work_type.tag,
                    e.label,
                    e.start_time,
                    e.end_time,
                    e.hours_input,
                )
                for e in employee.entries
            ],
        )

    def _select(self, where: str = "", params: tuple = ()) -> list[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees {where} ORDER BY name", params)
            rows = fetchall(cur)
            return [self._load(cur, r) for r in rows]

    def list_all(self) -> Sequence[Employee]:
        return self._select()

    def list_by_department(self, department: str) -> Sequence[Employee]:
        return self._select("WHERE dept_name=%s", (department,))

    def get_by_name(self, name: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE name=%s", (name,))
            row = fetchone(cur)
            if not row:
                return None
            return self._load(cur, row)

    def create(self, employee: Employee) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, base_salary, start_date, end_date, dept_name, version)
                VALUES(%s,%s,%s,%s,%s,0)
                """,
                (employee.name, employee.base_salary, employee.start_date, employee.end_date, employee.department),
            )
            self._write_children(cur, employee)

    @classmethod
    def update(cls, cur, employee: Employee) -> Employee:
        """Version-checked update on an open cursor; the caller owns the transaction."""
        cur.execute(
            """
            UPDATE employees
            SET base_salary=%s, end_date=%s, dept_name=%s, version=version+1
            WHERE name=%s AND version=%s
            """,
            (employee.base_salary, employee.end_date, employee.department, employee.name, employee.version),
        )
        if cur.rowcount == 0:
            raise ConcurrencyError(f"Employee {employee.name} was modified concurrently")
        cls._write_children(cur, employee)
        return replace(employee, version=employee.version + 1)

    def save(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            return self.update(cur, employee)
