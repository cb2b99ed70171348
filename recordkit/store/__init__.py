from .schema import StoreSchema, IdentityPolicy
from .record_store import RecordStore

__all__ = ["StoreSchema", "IdentityPolicy", "RecordStore"]
