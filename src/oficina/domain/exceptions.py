"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a value breaks a business rule."""


class NotFoundError(DomainException):
    """A referenced identifier does not exist in the addressed collection."""


class IllegalStateError(DomainException):
    """The operation is not allowed in the order's current status."""


class ExternalServiceError(DomainException):
    """The backing store returned a failure."""


class StoreError(Exception):
    """Raw failure reported by a registry store.

    Carries the store's error ``code`` so the application layer can turn it
    into an ExternalServiceError with a readable message.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
