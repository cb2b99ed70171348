from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from ..type_enum import FieldType
from ..predicate import Predicate

T = TypeVar('T')


class Field(ABC, Generic[T]):
    """
    One column value of a record, with an exact byte encoding.

    Encodings are little-endian and fixed in size: get_size() bytes for
    every instance of a numeric or boolean field, the column width for
    text. Values are immutable once built, so records can share fields
    between copies.
    """

    @abstractmethod
    def get_value(self) -> T:
        pass

    @abstractmethod
    def serialize(self) -> bytes:
        """Exactly get_size() bytes."""
        pass

    @classmethod
    @abstractmethod
    def deserialize(cls, data: bytes) -> 'Field':
        """
        Inverse of serialize().

        Raises:
            TypeError: If data is not bytes
            ValueError: If data has the wrong length or does not decode
        """
        pass

    @abstractmethod
    def get_size(self) -> int:
        pass

    @abstractmethod
    def get_type(self) -> FieldType:
        pass

    @abstractmethod
    def compare(self, predicate: Predicate, other: 'Field') -> bool:
        """`self <predicate> other`; other must be the same field class."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass

    @abstractmethod
    def __repr__(self) -> str:
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass
