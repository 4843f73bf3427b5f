from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_not_future
from ..core.exceptions import ConflictError
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..payroll.rebuilder import LedgerRebuilder
from .model import Holiday, holiday_dates
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    """Use case: maintain the holiday calendar.

    A new holiday changes working-day counts retroactively, so every ledger is
    rebuilt.
    """

    def __init__(
        self,
        holidays: HolidayRepository,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        rebuilder: LedgerRebuilder,
    ):
        self._holidays = holidays
        self._employees = employees
        self._departments = departments
        self._rebuilder = rebuilder

    def list_holidays(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def add_holiday(self, *, holiday_date: date, today: Optional[date] = None) -> Holiday:
        today = today or today_local()
        require_not_future(holiday_date, "Holiday date", today)

        if self._holidays.get_by_date(holiday_date):
            raise ConflictError("Holiday already exists")

        holiday = Holiday(holiday_date=holiday_date)
        calendar = holiday_dates(self._holidays.list_all()) | {holiday_date}
        departments = {d.name: d for d in self._departments.list_all()}
        rebuilt = self._rebuilder.rebuild_many(
            self._employees.list_all(),
            departments,
            today=today,
            holidays=calendar,
        )

        self._rebuilder.save_all(rebuilt, holiday=holiday)
        logger.info("Added holiday %s (%d employees rebuilt)", holiday_date, len(rebuilt))
        return holiday
