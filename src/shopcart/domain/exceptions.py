"""Domain-level exceptions.

All failures the core can report are subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Each kind stays distinct so callers can tell a rejected request from an
empty cart or a storage failure.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or out of range."""


class EntityNotFoundError(DomainException):
    """A referenced product, cart line or order does not exist."""


class EmptyCartError(DomainException):
    """Checkout was attempted with no cart lines."""


class StorageFault(DomainException):
    """The underlying store failed; the transaction was rolled back."""
