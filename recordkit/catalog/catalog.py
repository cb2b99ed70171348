import logging
from pathlib import Path
from typing import Iterator, Optional

from ..core.exceptions import StoreException
from ..store import RecordStore, StoreSchema
from .schemas import BUILTIN_SCHEMAS

logger = logging.getLogger(__name__)


class Catalog:
    """
    Registry of record schemas by name.

    The catalog validates schemas as they are registered and opens
    RecordStores for them, resolving each schema's fixed file name inside
    a data directory.
    """

    def __init__(self, schemas: Optional[list[StoreSchema]] = None):
        self._schemas: dict[str, StoreSchema] = {}
        for schema in schemas or []:
            self.add_schema(schema)

    @classmethod
    def builtin(cls) -> 'Catalog':
        """Catalog holding the schemas of every bundled program."""
        return cls(BUILTIN_SCHEMAS)

    def add_schema(self, schema: StoreSchema) -> None:
        """
        Register a schema.

        Raises:
            StoreException: If the name or file name is already registered
        """
        if self.schema_exists(schema.name):
            raise StoreException(f"Schema '{schema.name}' already exists")

        if schema.filename is not None:
            for other in self._schemas.values():
                if other.filename == schema.filename:
                    raise StoreException(
                        f"Schema '{schema.name}' reuses file '{schema.filename}' of '{other.name}'")

        self._schemas[schema.name] = schema
        logger.debug("Registered schema %s (%d bytes per record)", schema.name, schema.record_size)

    def get_schema(self, name: str) -> StoreSchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise StoreException(f"Schema '{name}' not found")

    def schema_exists(self, name: str) -> bool:
        return name in self._schemas

    def get_schema_names(self) -> list[str]:
        return list(self._schemas)

    def open_store(self, name: str, data_dir: str | Path = ".",
                   atomic_save: bool = True, load: bool = True) -> RecordStore:
        """
        Create a store for a schema, optionally loading its file.

        Schemas without a file name give a purely in-memory store.
        """
        schema = self.get_schema(name)
        file_path = Path(data_dir) / schema.filename if schema.filename else None
        store = RecordStore(schema, file_path=file_path, atomic_save=atomic_save)

        if load and file_path is not None:
            store.load()
        return store

    def __iter__(self) -> Iterator[StoreSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)
