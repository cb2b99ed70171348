import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class RecordFileStats:
    records_read: int = 0
    records_written: int = 0
    bytes_read: int = 0
    bytes_written: int = 0
    trailing_bytes_ignored: int = 0


class RecordFile:
    """
    Whole-file I/O for a flat sequence of fixed-size records.

    The file has no header, footer or length prefix: record N lives at
    byte offset N * record_size, and the record count is the file length
    divided by the record size. A trailing partial record is ignored on
    read.
    """

    def __init__(self, file_path: str | Path, record_size: int):
        if record_size <= 0:
            raise ValueError(f"Record size must be positive, got {record_size}")

        self.file_path = Path(file_path)
        self.record_size = record_size
        self.stats = RecordFileStats()

    def read_records(self, max_records: int | None = None) -> list[bytes]:
        """
        Read whole records in file order.

        Args:
            max_records: Stop after this many records (None reads them all)

        Returns:
            Raw record buffers, each exactly record_size bytes. An absent
            file yields an empty list.

        Raises:
            StorageError: If the file exists but cannot be read
        """
        try:
            with open(self.file_path, 'rb') as f:
                raw_data = f.read()
        except FileNotFoundError:
            logger.debug("No record file at %s", self.file_path)
            return []
        except OSError as e:
            raise StorageError(f"Failed to read {self.file_path}: {e}")

        whole, remainder = divmod(len(raw_data), self.record_size)
        if remainder:
            self.stats.trailing_bytes_ignored += remainder
            logger.warning("Ignoring %d trailing bytes in %s (record size %d)",
                           remainder, self.file_path, self.record_size)

        count = whole if max_records is None else min(whole, max_records)
        if count < whole:
            logger.warning("%s holds %d records, reading only the first %d",
                           self.file_path, whole, count)

        chunks = [
            raw_data[i * self.record_size:(i + 1) * self.record_size]
            for i in range(count)
        ]

        self.stats.records_read += count
        self.stats.bytes_read += count * self.record_size
        return chunks

    def write_records(self, records: Iterable[bytes], atomic: bool = True) -> int:
        """
        Replace the whole file with the given records, in order.

        With atomic=True the data is written to a sibling temp file,
        flushed to disk and renamed over the target, so readers see either
        the old or the new content. With atomic=False the target is
        truncated and written in place, and a failure can leave a partial
        file behind.

        Returns:
            Number of records written

        Raises:
            StorageError: If the target cannot be written
            ValueError: If a record buffer has the wrong size
        """
        buffers = list(records)
        for i, data in enumerate(buffers):
            if len(data) != self.record_size:
                raise ValueError(
                    f"Record {i} must be exactly {self.record_size} bytes, got {len(data)}")

        target = self.file_path
        temp_file = target.with_name(target.name + '.tmp') if atomic else target

        try:
            with open(temp_file, 'wb') as f:
                for data in buffers:
                    f.write(data)
                f.flush()
                os.fsync(f.fileno())

            if atomic:
                os.replace(temp_file, target)
        except OSError as e:
            if atomic:
                try:
                    temp_file.unlink()
                except OSError:
                    pass
            raise StorageError(f"Failed to write {target}: {e}")

        written = len(buffers)
        self.stats.records_written += written
        self.stats.bytes_written += written * self.record_size
        logger.debug("Wrote %d records to %s", written, target)
        return written

    def __repr__(self) -> str:
        return f"RecordFile({str(self.file_path)!r}, record_size={self.record_size})"
