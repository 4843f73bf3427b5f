from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    An employee is saved as one unit: row, salary history and ledger entries.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_department(self, department: str) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> None:
        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        """Persist changes; returns the employee with its bumped version.

        Raises ConcurrencyError when the stored version differs.
        """

        raise NotImplementedError
