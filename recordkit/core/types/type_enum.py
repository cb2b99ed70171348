from enum import Enum
from typing import Optional


class FieldType(Enum):
    """
    Enum for field types.
    """
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING = "string"

    def is_fixed(self) -> bool:
        """Strings take their width from the column, everything else is fixed."""
        return self is not FieldType.STRING

    def get_length(self) -> Optional[int]:
        """Get the length of the field type in bytes (None for strings)."""
        length_map = {
            FieldType.INT: 4,
            FieldType.LONG: 8,
            FieldType.DOUBLE: 8,
            FieldType.BOOLEAN: 1,
            FieldType.STRING: None,
        }

        return length_map[self]
