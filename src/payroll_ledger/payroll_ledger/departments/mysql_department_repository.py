from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.exceptions import ConcurrencyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import Department, HoursChange
from .repository import DepartmentRepository


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _load_history(cur, name: str) -> tuple[HoursChange, ...]:
        cur.execute(
            """
            SELECT hours, effective_date
            FROM department_hours_history
            WHERE dept_name=%s
            ORDER BY effective_date, history_id
            """,
            (name,),
        )
        return tuple(
            HoursChange(hours=to_decimal(r["hours"]), effective_date=r["effective_date"])
            for r in fetchall(cur)
        )

    @staticmethod
    def _write_history(cur, department: Department) -> None:
        cur.execute("DELETE FROM department_hours_history WHERE dept_name=%s", (department.name,))
        cur.executemany(
            "INSERT INTO department_hours_history(dept_name, hours, effective_date) VALUES(%s,%s,%s)",
            [(department.name, h.hours, h.effective_date) for h in department.hours_history],
        )

    def _to_department(self, cur, row: dict) -> Department:
        return Department(
            name=row["name"],
            hours=to_decimal(row["hours"]),
            hours_history=self._load_history(cur, row["name"]),
            version=int(row["version"]),
        )

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, hours, version FROM departments ORDER BY name")
            rows = fetchall(cur)
            return [self._to_department(cur, r) for r in rows]

    def get_by_name(self, name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, hours, version FROM departments WHERE name=%s", (name,))
            row = fetchone(cur)
            if not row:
                return None
            return self._to_department(cur, row)

    def create(self, department: Department) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departments(name, hours, version) VALUES(%s,%s,0)",
                (department.name, department.hours),
            )
            self._write_history(cur, department)

    @classmethod
    def update(cls, cur, department: Department) -> Department:
        """Version-checked update on an open cursor; the caller owns the transaction."""
        cur.execute(
            """
            UPDATE departments
            SET hours=%s, version=version+1
            WHERE name=%s AND version=%s
            """,
            (department.hours, department.name, department.version),
        )
        if cur.rowcount == 0:
            raise ConcurrencyError(f"Department {department.name} was modified concurrently")
        cls._write_history(cur, department)
        return replace(department, version=department.version + 1)

    def save(self, department: Department) -> Department:
        with db_cursor(self._conn_factory) as (_, cur):
            return self.update(cur, department)

    def delete(self, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE name=%s", (name,))
            return cur.rowcount > 0
