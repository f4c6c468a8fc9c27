"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Looking up an order that does not exist is *not* an error: repositories and
handlers return ``None`` for that case.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateOrderError(ValidationError):
    """An order with the same identifier is already stored."""


class EntityNotFoundError(DomainException):
    """A referenced catalog entity does not exist."""


class OutOfServiceAreaError(DomainException):
    """The delivery address is outside the service area."""


class StorageUnavailable(DomainException):
    """The underlying order store could not be written."""
