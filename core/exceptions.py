# core/exceptions.py

class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str,*, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when input data is invalid (bad level, negative cost, percent out of range...)."""


class StructuralViolationError(DomainError):
    """Raised when a WBS snapshot does not form a well-formed forest (unknown parent, cycle...)."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""
