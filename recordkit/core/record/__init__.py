from .column import Column
from .record_desc import RecordDesc
from .record import Record
from .record_id import RecordId

__all__ = ["Column", "RecordDesc", "Record", "RecordId"]
