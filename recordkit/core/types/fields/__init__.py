from .int_field import IntField
from .long_field import LongField
from .double_field import DoubleField
from .boolean_field import BoolField
from .string_field import StringField

__all__ = ["IntField", "LongField", "DoubleField", "BoolField", "StringField"]
