"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them leave the cart half-modified or advance the order counter.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidSelectionError(DomainException):
    """A menu position was zero or outside the listed range.

    Treated as a cancellation by the shop session, not as a failure.
    """


class InvalidQuantityError(DomainException):
    """A non-positive quantity was requested."""


class EmptyCartError(DomainException):
    """Checkout was attempted with nothing in the cart."""
