from .fields.field import Field
from .fields import (
    IntField,
    LongField,
    DoubleField,
    BoolField,
    StringField,
)
from .type_enum import FieldType
from .predicate import Predicate

__all__ = [
    'Field',
    'IntField',
    'LongField',
    'DoubleField',
    'BoolField',
    'StringField',
    'FieldType',
    'Predicate',
]
