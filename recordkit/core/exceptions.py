"""Custom exceptions for the record store."""


class StoreException(Exception):
    """Base exception for record-store errors."""
    pass


class StoreFullError(StoreException):
    """Raised when an insert would exceed the store's capacity."""
    pass


class DuplicateKeyError(StoreException):
    """Raised when a caller-supplied key is already used by a live record."""
    pass


class NotFoundError(StoreException, LookupError):
    """Raised when no record matches the requested key."""
    pass


class InvalidInputError(StoreException, ValueError):
    """Raised for out-of-range identities, negative values, empty required fields
    and values that do not fit their column."""
    pass
