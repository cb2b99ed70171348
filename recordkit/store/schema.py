from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.record import RecordDesc, Column
from ..core.types import FieldType


class IdentityPolicy(Enum):
    """
    How a store's key field is populated and checked.

    NONE:       no identity management; the key (if any) is lookup-only
                and duplicates are allowed (first match wins).
    CALLER:     the caller supplies the key; it must be unique among live
                records at insert time.
    POSITIONAL: the store assigns length + 1 at insert time and never
                renumbers. After a delete the next assigned identity can
                equal a live record's identity.
    SEQUENCE:   the store assigns from a counter that only moves forward;
                after a load it resumes at max(identity) + 1.
    """
    NONE = "none"
    CALLER = "caller"
    POSITIONAL = "positional"
    SEQUENCE = "sequence"

    def is_store_assigned(self) -> bool:
        return self in (IdentityPolicy.POSITIONAL, IdentityPolicy.SEQUENCE)


@dataclass(frozen=True)
class StoreSchema:
    """
    Everything a RecordStore needs to know about one kind of record.

    Attributes:
        name: Catalog name of the schema (e.g. "contacts")
        desc: Column layout of one record
        capacity: Maximum number of live records
        key_field: Column used by find/update/delete, if any
        identity: How the key field is populated and checked
        ignore_case: Compare STRING keys case-insensitively
        filename: Fixed file name for save/load, None when not persisted
    """
    name: str
    desc: RecordDesc
    capacity: int
    key_field: Optional[str] = None
    identity: IdentityPolicy = IdentityPolicy.NONE
    ignore_case: bool = False
    filename: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Schema name must not be empty")

        if self.capacity <= 0:
            raise ValueError(
                f"Schema '{self.name}' capacity must be positive, got {self.capacity}")

        if self.key_field is None:
            if self.identity is not IdentityPolicy.NONE:
                raise ValueError(
                    f"Schema '{self.name}' uses {self.identity.value} identity but has no key field")
            return

        if not self.desc.has_field(self.key_field):
            raise ValueError(
                f"Schema '{self.name}' key field '{self.key_field}' is not a column")

        key_type = self.key_column.field_type
        if key_type not in (FieldType.INT, FieldType.STRING):
            raise ValueError(
                f"Schema '{self.name}' key field must be INT or STRING, got {key_type.value}")

        if self.identity.is_store_assigned() and key_type is not FieldType.INT:
            raise ValueError(
                f"Schema '{self.name}' store-assigned identity requires an INT key field")

    @property
    def key_column(self) -> Optional[Column]:
        if self.key_field is None:
            return None
        return self.desc.get_column(self.desc.name_to_index(self.key_field))

    @property
    def record_size(self) -> int:
        return self.desc.get_size()
