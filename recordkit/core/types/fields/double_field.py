import struct
import math
from .field import Field
from ..type_enum import FieldType
from ..predicate import Predicate


class DoubleField(Field[float]):
    """64-bit floating point field, stored as little-endian IEEE 754."""

    # Tolerance for equality comparisons
    EPSILON = 1e-9
    SIZE = 8

    def __init__(self, value):
        """
        Initialize double field with validation.

        Raises:
            TypeError: If value cannot be converted to float
            ValueError: If value is NaN
        """
        if value is None or isinstance(value, bool):
            raise TypeError(f"DoubleField requires numeric value, got {type(value)}")

        try:
            self.value = float(value)
        except (ValueError, TypeError) as e:
            raise TypeError(
                f"DoubleField requires numeric value, got {type(value)}: {e}")

        if math.isnan(self.value):
            raise ValueError("DoubleField does not support NaN values")

    def get_value(self) -> float:
        return self.value

    def get_type(self) -> FieldType:
        return FieldType.DOUBLE

    def serialize(self) -> bytes:
        return struct.pack('<d', self.value)

    @classmethod
    def deserialize(cls, data: bytes) -> 'DoubleField':
        """
        Deserialize double field from exactly 8 bytes.

        Raises:
            ValueError: If data length is not 8 bytes or data is invalid
            TypeError: If data is not bytes/bytearray
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected bytes or bytearray, got {type(data)}")

        if len(data) != cls.SIZE:
            raise ValueError(
                f"DoubleField requires exactly {cls.SIZE} bytes, got {len(data)}")

        try:
            value = struct.unpack('<d', data)[0]
        except struct.error as e:
            raise ValueError(f"Invalid double data: {e}")
        return cls(value)

    def get_size(self) -> int:
        return self.SIZE

    def compare(self, predicate: Predicate, other: Field) -> bool:
        """
        Compare double fields with epsilon tolerance for (in)equality.

        Raises:
            TypeError: If other is not a DoubleField
            ValueError: If predicate is not supported
        """
        if not isinstance(other, DoubleField):
            raise TypeError(f"Cannot compare DoubleField with {type(other)}")

        if math.isinf(self.value) or math.isinf(other.value):
            equal = self.value == other.value
        else:
            equal = abs(self.value - other.value) < self.EPSILON

        comparisons = {
            Predicate.EQUALS: equal,
            Predicate.NOT_EQUALS: not equal,
            Predicate.GREATER_THAN: self.value > other.value,
            Predicate.LESS_THAN: self.value < other.value,
            Predicate.GREATER_THAN_OR_EQ: self.value >= other.value,
            Predicate.LESS_THAN_OR_EQ: self.value <= other.value,
            Predicate.LIKE: equal,
        }

        if predicate not in comparisons:
            raise ValueError(
                f"Unsupported predicate for DoubleField: {predicate}")

        return comparisons[predicate]

    def __str__(self) -> str:
        if math.isinf(self.value):
            return "inf" if self.value > 0 else "-inf"
        return str(self.value)

    def __repr__(self) -> str:
        return f"DoubleField({self.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleField):
            return False

        if math.isinf(self.value) or math.isinf(other.value):
            return self.value == other.value

        return abs(self.value - other.value) < self.EPSILON

    def __hash__(self) -> int:
        # Round to avoid floating point precision issues in hashing
        return hash(round(self.value, 9))
