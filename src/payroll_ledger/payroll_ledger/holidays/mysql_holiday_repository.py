from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_date FROM holidays ORDER BY holiday_date")
            return [Holiday(holiday_date=r["holiday_date"]) for r in fetchall(cur)]

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_date FROM holidays WHERE holiday_date=%s", (holiday_date,))
            row = fetchone(cur)
            if not row:
                return None
            return Holiday(holiday_date=row["holiday_date"])

    @staticmethod
    def insert(cur, holiday: Holiday) -> None:
        cur.execute("INSERT INTO holidays(holiday_date) VALUES(%s)", (holiday.holiday_date,))

    def create(self, holiday: Holiday) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            self.insert(cur, holiday)
