"""Domain-level exceptions.

Invalid commands (creating an order with no client, adding a duplicate
client) are expressed as subclasses of DomainException so the CLI layer
can catch them uniformly and display user-friendly messages.

The reporting transforms never raise these: malformed data is recovered
locally there.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The backing store could not be read or written."""
