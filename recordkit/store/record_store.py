import logging
from pathlib import Path
from typing import Any, Iterator, Optional

from ..core.exceptions import (
    StoreFullError, DuplicateKeyError, NotFoundError, InvalidInputError
)
from ..core.record import Record, RecordId
from ..core.types import FieldType, Predicate, StringField
from ..storage import RecordFile, RecordFileStats, StorageError, CorruptionError
from .schema import StoreSchema, IdentityPolicy

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Ordered, bounded collection of fixed-width records.

    The store keeps records in insertion order. Deletes shift every later
    record one position earlier, so relative order is always preserved.
    Lookups are linear scans from position 0 and the first match wins.

    Persistence is whole-table: save() writes every record as a flat
    sequence of fixed-size encodings, load() replaces the contents with
    what the file holds. Nothing is saved implicitly.

    A store is owned by a single caller and does no locking.
    """

    def __init__(self, schema: StoreSchema, file_path: str | Path | None = None,
                 atomic_save: bool = True):
        """
        Args:
            schema: Layout, key, identity policy and capacity of the records
            file_path: Where save/load go by default. Falls back to the
                schema's fixed file name (relative to the working directory)
            atomic_save: Write to a temp file and rename over the target
        """
        self.schema = schema
        self.desc = schema.desc
        self.atomic_save = atomic_save
        self._records: list[Record] = []
        self._next_identity = 1

        if file_path is None and schema.filename is not None:
            file_path = schema.filename
        self._file = RecordFile(file_path, schema.record_size) if file_path is not None else None

    @property
    def capacity(self) -> int:
        return self.schema.capacity

    @property
    def file_path(self) -> Optional[Path]:
        return self._file.file_path if self._file is not None else None

    @property
    def file_stats(self) -> Optional[RecordFileStats]:
        return self._file.stats if self._file is not None else None

    def is_full(self) -> bool:
        return len(self._records) >= self.schema.capacity

    def insert(self, values: dict[str, Any] | Record) -> RecordId:
        """
        Append a new record.

        For store-assigned identities the key field is filled in by the
        store (any value the caller passed for it is replaced).

        Returns:
            RecordId with the new position and the record's identity

        Raises:
            StoreFullError: If the store is at capacity
            DuplicateKeyError: If a caller-supplied key is already in use
            InvalidInputError: If a value is missing or does not fit its column
        """
        if len(self._records) >= self.schema.capacity:
            raise StoreFullError(
                f"Store '{self.schema.name}' is full ({self.schema.capacity} records)")

        if isinstance(values, Record):
            if not values.get_record_desc().equals(self.desc):
                raise InvalidInputError(
                    f"Record schema does not match store '{self.schema.name}'")
            values = values.to_dict()
        else:
            values = dict(values)

        policy = self.schema.identity
        key_field = self.schema.key_field
        if policy is IdentityPolicy.POSITIONAL:
            values[key_field] = len(self._records) + 1
        elif policy is IdentityPolicy.SEQUENCE:
            values[key_field] = self._next_identity

        record = self._build_record(values)

        if key_field is not None:
            key = record.get_value(key_field)
            if self.schema.key_column.field_type is FieldType.STRING and not key.strip():
                raise InvalidInputError(f"Field '{key_field}' must not be empty")
            if policy is IdentityPolicy.CALLER and self.find(key) is not None:
                raise DuplicateKeyError(
                    f"Store '{self.schema.name}' already has a record with {key_field} {key!r}")

        self._records.append(record)
        if policy is IdentityPolicy.SEQUENCE:
            self._next_identity += 1

        identity = record.get_value(key_field) if key_field is not None else None
        position = len(self._records) - 1
        logger.debug("Inserted %s record at position %d (identity=%r)",
                     self.schema.name, position, identity)
        return RecordId(position, identity)

    def find(self, key: Any) -> Optional[int]:
        """
        Position of the first record whose key matches, or None.

        STRING keys compare case-insensitively when the schema says so;
        INT keys compare exactly.
        """
        probe = self._normalize_key(key)
        key_index = self.desc.name_to_index(self.schema.key_field)

        for position, record in enumerate(self._records):
            if self._normalize_key(record.get_field(key_index).get_value()) == probe:
                return position
        return None

    def get(self, key: Any) -> Record:
        """Copy of the record matching key."""
        return self._records[self._require(key)].copy()

    def get_at(self, position: int) -> Record:
        """Copy of the record at a 0-based position."""
        if not (0 <= position < len(self._records)):
            raise IndexError(
                f"Position {position} out of range [0, {len(self._records)})")
        return self._records[position].copy()

    def update(self, key: Any, changes: dict[str, Any]) -> None:
        """
        Replace only the supplied fields of the record matching key.

        Fields whose value is None are left untouched. The key field
        cannot be changed. Nothing is modified unless every supplied value
        is valid.

        Raises:
            NotFoundError: If no record matches key
            InvalidInputError: On unknown fields, a key change, or bad values
        """
        position = self._require(key)
        current = self._records[position]
        changes = {name: value for name, value in changes.items() if value is not None}

        unknown = [name for name in changes if not self.desc.has_field(name)]
        if unknown:
            raise InvalidInputError(f"Unknown fields: {', '.join(sorted(unknown))}")

        key_field = self.schema.key_field
        if key_field is not None and key_field in changes:
            if self._normalize_key(changes[key_field]) != self._normalize_key(current.get_value(key_field)):
                raise InvalidInputError(f"Field '{key_field}' cannot be changed")
            del changes[key_field]

        updated = current.copy()
        try:
            for name, value in changes.items():
                updated.set_value(name, value)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(str(e)) from e

        self._records[position] = updated
        logger.debug("Updated %s record at position %d: %s",
                     self.schema.name, position, ", ".join(sorted(changes)))

    def delete(self, key: Any) -> Record:
        """
        Remove the record matching key, shifting later records down by one.

        Identities of the remaining records are not renumbered.

        Returns:
            The removed record

        Raises:
            NotFoundError: If no record matches key
        """
        position = self._require(key)
        removed = self._records.pop(position)
        logger.debug("Deleted %s record at position %d", self.schema.name, position)
        return removed

    def select(self, field_name: str, predicate: Predicate, value: Any) -> list[Record]:
        """
        Copies of every record whose field satisfies ``field <predicate> value``,
        in store order.
        """
        if not self.desc.has_field(field_name):
            raise InvalidInputError(f"Unknown field '{field_name}'")

        index = self.desc.name_to_index(field_name)
        column = self.desc.get_column(index)
        try:
            if column.field_type is FieldType.STRING:
                # a probe longer than the column can still be compared
                text = str(value)
                probe = StringField(text, width=max(column.width, len(text.encode('utf-8')) + 1))
            else:
                probe = column.make_field(value)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(str(e)) from e

        return [
            record.copy() for record in self._records
            if record.get_field(index).compare(predicate, probe)
        ]

    def clear(self) -> None:
        """Remove every record. A SEQUENCE counter keeps counting."""
        self._records.clear()

    def save(self, target: str | Path | None = None) -> int:
        """
        Write every record, in order, replacing the target file.

        Args:
            target: File to write; defaults to the store's file

        Returns:
            Number of records written

        Raises:
            StorageError: If there is no target or it cannot be written
        """
        record_file = self._resolve_file(target)
        written = record_file.write_records(
            (record.serialize() for record in self._records), atomic=self.atomic_save)
        logger.info("Saved %d %s records to %s", written, self.schema.name, record_file.file_path)
        return written

    def load(self, source: str | Path | None = None) -> int:
        """
        Replace the store's contents with the records held in a file.

        A missing file is not an error: the store becomes empty and 0 is
        returned. At most capacity records are read; a trailing partial
        record is ignored.

        Returns:
            Number of records loaded

        Raises:
            StorageError: If the file exists but cannot be read
            CorruptionError: If a record cannot be decoded; the store is
                left unchanged
        """
        record_file = self._resolve_file(source)
        chunks = record_file.read_records(max_records=self.schema.capacity)

        records = []
        for i, data in enumerate(chunks):
            try:
                records.append(Record.deserialize(data, self.desc))
            except (TypeError, ValueError) as e:
                raise CorruptionError(
                    f"Record {i} in {record_file.file_path} is corrupt: {e}") from e

        self._records = records
        self._next_identity = 1
        if self.schema.identity is IdentityPolicy.SEQUENCE and records:
            key_field = self.schema.key_field
            self._next_identity = max(record.get_value(key_field) for record in records) + 1

        logger.info("Loaded %d %s records from %s", len(records), self.schema.name,
                    record_file.file_path)
        return len(records)

    def _resolve_file(self, path: str | Path | None) -> RecordFile:
        if path is None:
            if self._file is None:
                raise StorageError(f"Store '{self.schema.name}' has no file")
            return self._file
        if self._file is not None and Path(path) == self._file.file_path:
            return self._file
        return RecordFile(path, self.schema.record_size)

    def _build_record(self, values: dict[str, Any]) -> Record:
        try:
            return Record.from_values(self.desc, values)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(str(e)) from e

    def _normalize_key(self, key: Any) -> Any:
        key_column = self.schema.key_column
        if key_column is None:
            raise InvalidInputError(f"Store '{self.schema.name}' has no key field")

        if key_column.field_type is FieldType.INT:
            if isinstance(key, bool) or not isinstance(key, int):
                raise InvalidInputError(
                    f"Key for '{self.schema.name}' must be an int, got {type(key).__name__}")
            return key

        if not isinstance(key, str):
            raise InvalidInputError(
                f"Key for '{self.schema.name}' must be a str, got {type(key).__name__}")
        return key.casefold() if self.schema.ignore_case else key

    def _require(self, key: Any) -> int:
        position = self.find(key)
        if position is None:
            raise NotFoundError(
                f"No {self.schema.name} record with {self.schema.key_field} {key!r}")
        return position

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.list())

    def __repr__(self) -> str:
        return (f"RecordStore({self.schema.name!r}, {len(self._records)}/"
                f"{self.schema.capacity} records)")

    def list(self) -> list[Record]:
        """Snapshot copies of all records in current order."""
        return [record.copy() for record in self._records]
