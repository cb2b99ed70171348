import struct
from .field import Field
from ..type_enum import FieldType
from ..predicate import Predicate


class IntField(Field[int]):
    """
    Field implementation for 32-bit signed integers.

    Storage format: 4 bytes in little-endian format
    Range: -2,147,483,648 to 2,147,483,647
    """

    MIN_VALUE = -2**31
    MAX_VALUE = 2**31 - 1
    SIZE = 4
    FORMAT = '<i'

    def __init__(self, value):
        """
        Initialize integer field with validation.

        Args:
            value: Must be an integer within the signed range of this field

        Raises:
            TypeError: If value is not an integer
            ValueError: If value is out of range
        """
        name = type(self).__name__
        if isinstance(value, bool) or not isinstance(value, int):
            # Accept integral numerics, but never silently truncate 2.5 to 2
            if hasattr(value, '__index__') and not isinstance(value, bool):
                value = value.__index__()
            else:
                raise TypeError(f"{name} requires int, got {type(value)}")

        if not (self.MIN_VALUE <= value <= self.MAX_VALUE):
            raise ValueError(
                f"Integer value {value} out of range [{self.MIN_VALUE}, {self.MAX_VALUE}]")

        self.value = value

    def get_value(self) -> int:
        return self.value

    def get_type(self) -> FieldType:
        return FieldType.INT

    def serialize(self) -> bytes:
        return struct.pack(self.FORMAT, self.value)

    @classmethod
    def deserialize(cls, data: bytes) -> 'IntField':
        """
        Deserialize an integer from exactly SIZE bytes.

        Raises:
            ValueError: If data length is wrong or data is invalid
            TypeError: If data is not bytes/bytearray
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected bytes or bytearray, got {type(data)}")

        if len(data) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} requires exactly {cls.SIZE} bytes, got {len(data)}"
            )

        try:
            value = struct.unpack(cls.FORMAT, data)[0]
        except struct.error as e:
            raise ValueError(f"Invalid integer data: {e}")
        return cls(value)

    def get_size(self) -> int:
        return self.SIZE

    def compare(self, predicate: Predicate, other: Field) -> bool:
        """
        Compare this integer field with another field of the same class.

        LIKE behaves as EQUALS for integers.

        Raises:
            TypeError: If other is not the same field class
            ValueError: If predicate is not supported
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other)}")

        comparisons = {
            Predicate.EQUALS: lambda a, b: a == b,
            Predicate.NOT_EQUALS: lambda a, b: a != b,
            Predicate.GREATER_THAN: lambda a, b: a > b,
            Predicate.GREATER_THAN_OR_EQ: lambda a, b: a >= b,
            Predicate.LESS_THAN: lambda a, b: a < b,
            Predicate.LESS_THAN_OR_EQ: lambda a, b: a <= b,
            Predicate.LIKE: lambda a, b: a == b,
        }

        if predicate not in comparisons:
            raise ValueError(
                f"Unsupported predicate for {type(self).__name__}: {predicate}"
            )

        return comparisons[predicate](self.value, other.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
