from .records import AggregateEntry, JoinedRecord, PersonRecord

__all__ = ["AggregateEntry", "JoinedRecord", "PersonRecord"]
