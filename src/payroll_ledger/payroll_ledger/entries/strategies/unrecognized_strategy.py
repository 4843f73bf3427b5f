from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .base import WorkTypeStrategy


@dataclass(frozen=True)
class UnrecognizedWorkType(WorkTypeStrategy):
    """Unknown declaration: kept verbatim, worth zero hours."""

    raw_tag: str = ""

    @property
    def tag(self) -> str:
        return self.raw_tag

    @property
    def label(self) -> str:
        return self.raw_tag

    def worked_hours(self, department_hours: Decimal) -> Decimal:
        return Decimal(0)
