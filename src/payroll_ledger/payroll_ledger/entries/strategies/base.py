from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WorkResult:
    hours: Decimal
    label: str


class WorkTypeStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's work declaration becomes hours.

    Each concrete strategy is also the tagged value stored on an Entry, so a
    rebuild can re-evaluate the declaration against new department hours.
    """

    @property
    @abstractmethod
    def tag(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def label(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def worked_hours(self, department_hours: Decimal) -> Decimal:
        raise NotImplementedError

    def raw_inputs(self) -> tuple[str, str, Decimal]:
        """(start_time, end_time, hours_input) as stored on the entry."""
        return "", "", Decimal(0)

    def evaluate(self, department_hours: Decimal) -> WorkResult:
        return WorkResult(hours=self.worked_hours(department_hours), label=self.label)
