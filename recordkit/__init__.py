"""
recordkit - fixed-capacity record stores with whole-file binary persistence,
and the small console programs built on them.
"""
from .core.exceptions import (
    StoreException,
    StoreFullError,
    DuplicateKeyError,
    NotFoundError,
    InvalidInputError,
)
from .core.record import Column, RecordDesc, Record, RecordId
from .core.types import FieldType, Predicate
from .storage import StorageError, CorruptionError
from .store import RecordStore, StoreSchema, IdentityPolicy
from .catalog import Catalog

__version__ = "0.1.0"

__all__ = [
    "StoreException",
    "StoreFullError",
    "DuplicateKeyError",
    "NotFoundError",
    "InvalidInputError",
    "StorageError",
    "CorruptionError",
    "Column",
    "RecordDesc",
    "Record",
    "RecordId",
    "FieldType",
    "Predicate",
    "RecordStore",
    "StoreSchema",
    "IdentityPolicy",
    "Catalog",
]
