from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal

from ...common.datetime_utils import format_hhmm, hours_between
from ...core.enums import WorkTypeTag
from .base import WorkTypeStrategy


@dataclass(frozen=True)
class CustomRangeWorkType(WorkTypeStrategy):
    """Worked from ``start`` to ``end`` on the same day; labelled "HH:MM-HH:MM"."""

    start: time
    end: time

    @property
    def tag(self) -> str:
        return WorkTypeTag.CUSTOM.value

    @property
    def label(self) -> str:
        return f"{format_hhmm(self.start)}-{format_hhmm(self.end)}"

    def raw_inputs(self) -> tuple[str, str, Decimal]:
        return format_hhmm(self.start), format_hhmm(self.end), Decimal(0)

    def worked_hours(self, department_hours: Decimal) -> Decimal:
        return hours_between(self.start, self.end)
