"""Domain-level exceptions.

Every rule violation raised by the domain or application layers derives
from DomainException so the CLI can catch them in one place and turn them
into user-facing messages.

Running out of stock is deliberately absent here: a refused withdrawal
is an ordinary outcome, reported through a return value.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
