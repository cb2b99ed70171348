from .int_field import IntField
from ..type_enum import FieldType


class LongField(IntField):
    """
    Field implementation for 64-bit signed integers.

    Storage format: 8 bytes in little-endian format. Used for Unix
    timestamps (seconds since the epoch).
    """

    MIN_VALUE = -2**63
    MAX_VALUE = 2**63 - 1
    SIZE = 8
    FORMAT = '<q'

    def get_type(self) -> FieldType:
        return FieldType.LONG
