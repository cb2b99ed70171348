from typing import Any

from ..types import Field
from .record_desc import RecordDesc


class Record:
    """
    Represents a single fixed-width row held by a record store.

    A Record contains:
    1. RecordDesc: schema defining the structure
    2. List of Fields: the actual data values, one per column

    Encoded, a record is always exactly desc.get_size() bytes.
    """

    def __init__(self, record_desc: RecordDesc):
        self.record_desc = record_desc
        self.fields: list[Field | None] = [None] * record_desc.num_fields()

    @classmethod
    def from_values(cls, record_desc: RecordDesc, values: dict[str, Any]) -> 'Record':
        """
        Build a complete record from a name -> value mapping.

        Raises:
            ValueError: If a column is missing, unknown, or a value is invalid
            TypeError: If a value has the wrong type for its column
        """
        unknown = set(values) - set(record_desc.get_field_names())
        if unknown:
            raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")

        record = cls(record_desc)
        for i, column in enumerate(record_desc.columns):
            if column.name not in values or values[column.name] is None:
                raise ValueError(f"Missing value for field '{column.name}'")
            record.set_field(i, column.make_field(values[column.name]))
        return record

    def get_record_desc(self) -> RecordDesc:
        return self.record_desc

    def set_field(self, field_index: int, field: Field) -> None:
        """
        Set the field at the given index.

        Validates that the index is valid, the field type matches the
        schema and, for strings, that the width matches the column.
        """
        column = self.record_desc.get_column(field_index)

        if field.get_type() != column.field_type:
            raise TypeError(
                f"Field {field_index} expects {column.field_type}, got {field.get_type()}")

        if field.get_size() != column.get_size():
            raise ValueError(
                f"Field {field_index} expects {column.get_size()} bytes, got {field.get_size()}")

        self.fields[field_index] = field

    def get_field(self, field_index: int) -> Field:
        """
        Get the field at the given index.

        Raises an exception if the field hasn't been set yet.
        """
        self.record_desc.get_column(field_index)

        field = self.fields[field_index]
        if field is None:
            raise ValueError(f"Field {field_index} has not been set")

        return field

    def get_value(self, field_name: str) -> Any:
        """Plain Python value of the named field."""
        return self.get_field(self.record_desc.name_to_index(field_name)).get_value()

    def set_value(self, field_name: str, value: Any) -> None:
        """Replace the named field, validating value against its column."""
        index = self.record_desc.name_to_index(field_name)
        self.set_field(index, self.record_desc.get_column(index).make_field(value))

    def __getitem__(self, field_name: str) -> Any:
        return self.get_value(field_name)

    def is_complete(self) -> bool:
        """Check if all fields in this record have been set."""
        return all(field is not None for field in self.fields)

    def copy(self) -> 'Record':
        """Shallow copy; fields are immutable values so sharing them is safe."""
        clone = Record(self.record_desc)
        clone.fields = list(self.fields)
        return clone

    def to_dict(self) -> dict[str, Any]:
        return {
            column.name: (field.get_value() if field is not None else None)
            for column, field in zip(self.record_desc.columns, self.fields)
        }

    def serialize(self) -> bytes:
        """
        Serialize this record to exactly record_desc.get_size() bytes.

        Format: concatenation of all field encodings in column order.
        The descriptor itself is not included.
        """
        if not self.is_complete():
            raise ValueError("Cannot serialize incomplete record")

        data = b''.join(field.serialize() for field in self.fields)
        assert len(data) == self.record_desc.get_size()
        return data

    @classmethod
    def deserialize(cls, data: bytes, record_desc: RecordDesc) -> 'Record':
        """
        Rebuild a record from its encoding. Inverse of serialize().

        Raises:
            ValueError: If the data has the wrong size or a field is corrupt
        """
        if len(data) != record_desc.get_size():
            raise ValueError(
                f"Record needs exactly {record_desc.get_size()} bytes, got {len(data)}")

        record = cls(record_desc)
        for i, column in enumerate(record_desc.columns):
            offset = record_desc.get_field_offset(i)
            field_data = data[offset:offset + column.get_size()]
            record.set_field(i, column.read_field(field_data))

        return record

    def __str__(self) -> str:
        """Tab-separated string representation."""
        if not self.is_complete():
            return "<incomplete record>"

        return '\t'.join(str(field) for field in self.fields)

    def __repr__(self) -> str:
        return f"Record({self.to_dict()})"

    def __eq__(self, other: object) -> bool:
        """Two records are equal if they share a schema and field values."""
        if not isinstance(other, Record):
            return False

        return (self.record_desc.equals(other.record_desc) and
                self.fields == other.fields)

    def __hash__(self) -> int:
        if not self.is_complete():
            raise ValueError("Cannot hash incomplete record")
        return hash(tuple(self.fields))
