class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee or department does not exist."""


class ConflictError(DomainError):
    """Raised on duplicate keys, no-op updates and blocked operations."""


class ConcurrencyError(ConflictError):
    """Raised when a record changed since it was read (stale version)."""


class ComputationError(DomainError):
    """Raised when a pay computation cannot produce a finite result."""
