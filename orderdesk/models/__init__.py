from orderdesk.models.order import Order, SEARCHABLE_FIELDS, WIRE_FIELDS
from orderdesk.models.record_store import RecordStore

__all__ = ["Order", "RecordStore", "SEARCHABLE_FIELDS", "WIRE_FIELDS"]
