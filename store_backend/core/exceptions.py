# File: store_backend/core/exceptions.py

"""
Error taxonomy shared by the gateway, the hasher and the services.

Routes translate these into short plain-text HTTP responses; nothing here
ever reaches a client verbatim.
"""


class StoreError(Exception):
    """Base class for every error raised by the store backend."""


class DatabaseUnavailable(StoreError):
    """The database could not be reached at startup."""


class QueryError(StoreError):
    """A statement failed for any reason other than a constraint."""


class ConstraintViolation(QueryError):
    """The database rejected a write (e.g. unique username collision)."""


class HashingError(StoreError):
    """Password hashing or verification failed internally."""


class AuthFailure(StoreError):
    """Unknown username or password mismatch."""
