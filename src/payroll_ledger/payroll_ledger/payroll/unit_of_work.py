from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ..departments.model import Department
from ..employees.model import Employee
from ..holidays.model import Holiday


@dataclass(frozen=True)
class CommittedChanges:
    employees: list[Employee]
    department: Optional[Department] = None


class LedgerUnitOfWork(Protocol):
    """Persist a calendar or department change together with the ledgers it rebuilt.

    Either every record is written or none is: a duplicate holiday raises
    ConflictError and a stale department or employee version raises
    ConcurrencyError, both before anything becomes visible.
    """

    def commit(
        self,
        *,
        employees: Sequence[Employee] = (),
        department: Optional[Department] = None,
        holiday: Optional[Holiday] = None,
    ) -> CommittedChanges:
        raise NotImplementedError
