class DomainError(Exception):
    """Base exception for contract faults raised by the engine."""


class ValidationError(DomainError):
    """Raised when input data is malformed (a caller bug, not a data-quality issue)."""


class ConfigurationError(ValidationError):
    """Raised when a shift configuration is missing or inconsistent."""


class InvalidTransitionError(DomainError):
    """Raised when a status change is not allowed by the record lifecycle."""


class NotFoundError(DomainError):
    """Raised when a record id passed to a service action does not exist."""


class VersionConflict(DomainError):
    """Raised by the record store when the stored version differs from the expected one."""

    def __init__(self, record_id: str, expected: int, actual: int | None = None):
        self.record_id = record_id
        self.expected = expected
        self.actual = actual
        super().__init__(f"Record {record_id} version conflict (expected {expected}, stored {actual})")


class StoreError(DomainError):
    """Raised by a collaborator when a write cannot be completed."""
