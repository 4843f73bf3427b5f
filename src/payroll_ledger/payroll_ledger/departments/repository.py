from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, department: Department) -> None:
        raise NotImplementedError

    def save(self, department: Department) -> Department:
        """Persist changes; returns the department with its bumped version.

        Raises ConcurrencyError when the stored version differs.
        """

        raise NotImplementedError

    def delete(self, name: str) -> bool:
        raise NotImplementedError
