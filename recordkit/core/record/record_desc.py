from .column import Column
from ..types import FieldType


class RecordDesc:
    """
    Schema descriptor for a record.

    A RecordDesc defines:
    1. The ordered columns of the record (name, type, width)
    2. The byte offset of each column inside the encoded record
    3. The total encoded record size

    The encoded record is the concatenation of the column encodings in
    order, with no padding and no header, so the layout is identical on
    every platform.
    """

    def __init__(self, columns: list[Column]):
        if not columns:
            raise ValueError("RecordDesc must have at least one column")

        names = [column.name for column in columns]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate column names: {', '.join(duplicates)}")

        self.columns = list(columns)
        self._index = {name: i for i, name in enumerate(names)}

        self._offsets = []
        offset = 0
        for column in self.columns:
            self._offsets.append(offset)
            offset += column.get_size()
        self._size = offset

    def num_fields(self) -> int:
        """Return the number of columns in this descriptor."""
        return len(self.columns)

    def get_column(self, field_index: int) -> Column:
        if not (0 <= field_index < len(self.columns)):
            raise IndexError(
                f"Field index {field_index} out of range [0, {len(self.columns)})")
        return self.columns[field_index]

    def get_field_type(self, field_index: int) -> FieldType:
        """Get the type of the field at the given index."""
        return self.get_column(field_index).field_type

    def get_field_name(self, field_index: int) -> str:
        """Get the name of the field at the given index."""
        return self.get_column(field_index).name

    def get_field_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def get_field_offset(self, field_index: int) -> int:
        """Byte offset of a field inside the encoded record."""
        self.get_column(field_index)
        return self._offsets[field_index]

    def has_field(self, field_name: str) -> bool:
        return field_name in self._index

    def name_to_index(self, field_name: str) -> int:
        """Find the index of a column by name."""
        try:
            return self._index[field_name]
        except KeyError:
            raise ValueError(
                f"Field '{field_name}' not found in record descriptor")

    def get_size(self) -> int:
        """Total size in bytes of one encoded record."""
        return self._size

    def equals(self, other: 'RecordDesc') -> bool:
        """Two descriptors are equal when their columns match exactly."""
        if not isinstance(other, RecordDesc):
            return False
        return self.columns == other.columns

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RecordDesc) and self.equals(other)

    def __hash__(self) -> int:
        return hash(tuple(self.columns))

    def __str__(self) -> str:
        return f"RecordDesc({', '.join(str(column) for column in self.columns)})"

    def __repr__(self) -> str:
        return self.__str__()
