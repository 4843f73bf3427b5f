from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...common.formatting import format_number
from ...core.enums import WorkTypeTag
from .base import WorkTypeStrategy


@dataclass(frozen=True)
class CustomHoursWorkType(WorkTypeStrategy):
    """Worked an explicit number of hours; labelled "HOURS_<n>"."""

    hours: Decimal

    @property
    def tag(self) -> str:
        return WorkTypeTag.CUSTOM_HOURS.value

    @property
    def label(self) -> str:
        return f"HOURS_{format_number(self.hours)}"

    def raw_inputs(self) -> tuple[str, str, Decimal]:
        return "", "", Decimal(self.hours)

    def worked_hours(self, department_hours: Decimal) -> Decimal:
        return Decimal(self.hours)
