from .field import Field
from ..type_enum import FieldType
from ..predicate import Predicate


class BoolField(Field[bool]):
    """
    Field implementation for boolean values.

    Storage format: 1 byte (0x00 for False, 0x01 for True). Any other
    byte value is treated as corrupt data.
    """

    SIZE = 1

    def __init__(self, value):
        """
        Initialize boolean field.

        Args:
            value: Any value that can be converted to bool
        """
        if value is None:
            raise TypeError("BoolField cannot accept None value")
        self.value = bool(value)

    def get_value(self) -> bool:
        return self.value

    def get_type(self) -> FieldType:
        return FieldType.BOOLEAN

    def serialize(self) -> bytes:
        return b'\x01' if self.value else b'\x00'

    @classmethod
    def deserialize(cls, data: bytes) -> 'BoolField':
        """
        Deserialize boolean field from exactly 1 byte.

        Raises:
            ValueError: If data length is not 1 byte or the byte is not 0/1
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected bytes or bytearray, got {type(data)}")

        if len(data) != cls.SIZE:
            raise ValueError(
                f"BoolField requires exactly 1 byte, got {len(data)}")

        if data[0] not in (0, 1):
            raise ValueError(f"Invalid boolean byte: {data[0]:#04x}")

        return cls(data[0] == 1)

    def get_size(self) -> int:
        return self.SIZE

    def compare(self, predicate: Predicate, other: Field) -> bool:
        """
        Compare boolean fields.

        Only EQUALS, NOT_EQUALS and LIKE (equality) are supported.
        """
        if not isinstance(other, BoolField):
            raise TypeError(f"Cannot compare BoolField with {type(other)}")

        if predicate in (Predicate.EQUALS, Predicate.LIKE):
            return self.value == other.value
        elif predicate == Predicate.NOT_EQUALS:
            return self.value != other.value
        else:
            raise ValueError(
                f"Unsupported predicate {predicate} for boolean fields")

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BoolField({self.value})"

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other) -> bool:
        return isinstance(other, BoolField) and self.value == other.value
