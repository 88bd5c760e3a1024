"""
Domain errors raised by the customer resolvers.

Strawberry reports any exception raised from a resolver in the response's
``errors`` list. GraphQL-core copies an ``extensions`` dict found on the
original exception, so each error kind exposes its code there.
"""

from __future__ import annotations

from typing import Any


class CustomerServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class InvalidArgument(CustomerServiceError):
    """A caller-supplied value is malformed, e.g. an id that is not a UUID."""

    code = "INVALID_ARGUMENT"


class ConstraintViolation(CustomerServiceError):
    """The store rejected a write because of a uniqueness constraint."""

    code = "CONSTRAINT_VIOLATION"


class CustomerNotFound(CustomerServiceError):
    """No customer exists for the requested id."""

    code = "NOT_FOUND"

    def __init__(self, message: str = "customer does not exist"):
        super().__init__(message)


class StoreError(CustomerServiceError):
    """Communication with the backing store failed."""

    code = "STORE_ERROR"
