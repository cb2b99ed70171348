from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RecordId:
    """
    Where a record landed on insert.

    A RecordId consists of:
    1. position: 0-based index in the store's current order
    2. identity: the store-assigned identity, or the caller's key when the
       schema has one (None for keyless schemas)

    Positions shift after deletes; identities do not.
    """
    position: int
    identity: Optional[object] = None

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(
                f"Position must be non-negative, got {self.position}")

    def __str__(self) -> str:
        return f"RecordId(position={self.position}, identity={self.identity})"
