from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...core.enums import WorkTypeTag
from .base import WorkTypeStrategy


@dataclass(frozen=True)
class HalfDayWorkType(WorkTypeStrategy):
    """Worked half of the department's day."""

    @property
    def tag(self) -> str:
        return WorkTypeTag.HALF_DAY.value

    @property
    def label(self) -> str:
        return WorkTypeTag.HALF_DAY.value

    def worked_hours(self, department_hours: Decimal) -> Decimal:
        return Decimal(department_hours) / 2
