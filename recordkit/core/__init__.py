from .exceptions import (
    StoreException,
    StoreFullError,
    DuplicateKeyError,
    NotFoundError,
    InvalidInputError,
)

__all__ = [
    "StoreException",
    "StoreFullError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidInputError",
]
