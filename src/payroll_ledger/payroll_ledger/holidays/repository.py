from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_date(self, holiday_date: date) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, holiday: Holiday) -> None:
        """Insert a holiday; raises ConflictError when the date already exists."""

        raise NotImplementedError
