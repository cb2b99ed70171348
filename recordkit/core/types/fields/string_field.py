from .field import Field
from ..type_enum import FieldType
from ..predicate import Predicate


class StringField(Field[str]):
    """
    Field implementation for fixed-capacity strings.

    Storage format: exactly ``width`` bytes. The UTF-8 encoded text comes
    first, followed by zero bytes up to the full width. At most
    ``width - 1`` bytes of text fit, so every encoding carries at least one
    terminating zero byte.

    Bytes after the first zero are filler and are ignored when decoding.
    Text that does not fit is rejected, never truncated.
    """
    DEFAULT_WIDTH = 128

    def __init__(self, value, width: int = DEFAULT_WIDTH):
        """
        Initialize string field with validation.

        Args:
            value: Must be a string or convertible to string
            width: Total encoded width in bytes (terminator included)

        Raises:
            TypeError: If value cannot be converted to string
            ValueError: If the encoded string does not fit in the width
        """
        if value is None:
            raise TypeError("StringField cannot accept None value")

        if width < 1:
            raise ValueError(f"StringField width must be positive, got {width}")

        if not isinstance(value, str):
            try:
                value = str(value)
            except Exception as e:
                raise TypeError(
                    f"StringField requires str, got {type(value)}: {e}")

        if '\x00' in value:
            raise ValueError("StringField cannot contain null bytes")

        try:
            encoded = value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise ValueError(f"StringField cannot encode value as UTF-8: {e}")

        if len(encoded) > width - 1:
            raise ValueError(
                f"String too long: {len(encoded)} bytes > {width - 1}")

        self.value = value
        self.width = width
        self._encoded = encoded

    def get_value(self) -> str:
        return self.value

    def get_type(self) -> FieldType:
        return FieldType.STRING

    def serialize(self) -> bytes:
        result = self._encoded + b'\0' * (self.width - len(self._encoded))
        assert len(result) == self.width, f"Expected {self.width} bytes, got {len(result)}"
        return result

    @classmethod
    def deserialize(cls, data: bytes) -> 'StringField':
        """
        Create StringField from a fixed-width buffer; the width is len(data).

        Raises:
            ValueError: If there is no terminator or the text is not UTF-8
            TypeError: If data is not bytes/bytearray
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Expected bytes or bytearray, got {type(data)}")

        end = data.find(b'\0')
        if end < 0:
            raise ValueError(
                f"Unterminated string in {len(data)}-byte StringField")

        try:
            value = bytes(data[:end]).decode('utf-8')
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid UTF-8 data in StringField: {e}")

        return cls(value, width=len(data))

    def get_size(self) -> int:
        return self.width

    def compare(self, predicate: Predicate, other: Field) -> bool:
        """
        Compare this string field with another field.

        Ordering is lexicographic. LIKE is a case-sensitive substring test:
        ``a LIKE b`` holds when b occurs inside a.

        Raises:
            TypeError: If other is not a StringField
            ValueError: If predicate is not supported
        """
        if not isinstance(other, StringField):
            raise TypeError(f"Cannot compare StringField with {type(other)}")

        comparisons = {
            Predicate.EQUALS: lambda a, b: a == b,
            Predicate.NOT_EQUALS: lambda a, b: a != b,
            Predicate.GREATER_THAN: lambda a, b: a > b,
            Predicate.GREATER_THAN_OR_EQ: lambda a, b: a >= b,
            Predicate.LESS_THAN: lambda a, b: a < b,
            Predicate.LESS_THAN_OR_EQ: lambda a, b: a <= b,
            Predicate.LIKE: lambda a, b: b in a
        }

        if predicate not in comparisons:
            raise ValueError(
                f"Unsupported predicate for StringField: {predicate}")

        return comparisons[predicate](self.value, other.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"StringField({self.value!r}, width={self.width})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringField) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)
