"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and map them to a
response.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist or is not visible to the caller."""


class PersistenceError(DomainException):
    """The document store failed to complete an operation."""
