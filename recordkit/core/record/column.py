from dataclasses import dataclass
from typing import Optional

from ..types import (
    Field, FieldType, IntField, LongField, DoubleField, BoolField, StringField
)

_FIXED_FIELDS = {
    FieldType.INT: IntField,
    FieldType.LONG: LongField,
    FieldType.DOUBLE: DoubleField,
    FieldType.BOOLEAN: BoolField,
}


@dataclass(frozen=True)
class Column:
    """
    One named, typed column of a record schema.

    STRING columns carry their byte width (terminator included); every
    other type has the fixed size of its FieldType.
    """
    name: str
    field_type: FieldType
    width: Optional[int] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Column name must not be empty")
        if not self.field_type.is_fixed():
            if self.width is None or self.width < 2:
                raise ValueError(
                    f"STRING column '{self.name}' needs a width of at least 2, got {self.width}")
        elif self.width is not None:
            raise ValueError(
                f"Column '{self.name}' of type {self.field_type.value} cannot have a width")

    def get_size(self) -> int:
        """Size in bytes of this column's encoding."""
        if not self.field_type.is_fixed():
            return self.width
        return self.field_type.get_length()

    def make_field(self, value) -> Field:
        """Build a field of this column's type from a Python value."""
        if self.field_type is FieldType.STRING:
            return StringField(value, width=self.width)
        return _FIXED_FIELDS[self.field_type](value)

    def read_field(self, data: bytes) -> Field:
        """Decode this column's field from exactly get_size() bytes."""
        if len(data) != self.get_size():
            raise ValueError(
                f"Column '{self.name}' needs {self.get_size()} bytes, got {len(data)}")
        if self.field_type is FieldType.STRING:
            return StringField.deserialize(data)
        return _FIXED_FIELDS[self.field_type].deserialize(data)

    def __str__(self) -> str:
        if self.field_type is FieldType.STRING:
            return f"{self.field_type.value}[{self.width}]({self.name})"
        return f"{self.field_type.value}({self.name})"
