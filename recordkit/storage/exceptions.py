from ..core.exceptions import StoreException


class StorageError(StoreException):
    """Base class for storage-related errors (open/read/write failures)."""
    pass


class CorruptionError(StorageError):
    """Raised when a persisted record cannot be decoded."""
    pass
