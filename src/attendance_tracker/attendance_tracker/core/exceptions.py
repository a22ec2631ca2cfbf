class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvariantError(DomainError):
    """Raised when a caller hands over state that can never be valid (a bug, not user input)."""


class NotFoundError(DomainError):
    """Raised when a referenced student, subject or record does not exist."""
