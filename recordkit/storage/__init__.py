from .record_file import RecordFile, RecordFileStats
from .exceptions import StorageError, CorruptionError

__all__ = ["RecordFile", "RecordFileStats", "StorageError", "CorruptionError"]
