"""Product domain exceptions.

Raised by the Repository and Service layers.  The API layer (Views)
catches these by type and translates them into HTTP responses, so no
caller ever needs to inspect the message text.
"""

from __future__ import annotations


class ProductError(Exception):
    """Base class for every product-level failure."""


class ProductNotFound(ProductError):
    """No product row matches the requested identifier."""

    @classmethod
    def for_id(cls, id: int) -> ProductNotFound:
        return cls(f"Product with id {id} not found")


class ProductValidationError(ProductError):
    """Input violates a business rule (e.g. discount outside [0, 70])."""


class ProductPersistenceError(ProductError):
    """The database rejected a statement or could not be reached.

    The underlying driver error is chained as ``__cause__`` and is never
    exposed to API clients.
    """


class InvalidRequest(ProductError):
    """Malformed HTTP input: missing or unparseable parameters or body."""
