"""Repository layer for loading exchange records."""

from exchangelog.repositories.records import RecordLoadError, RecordRepository

__all__ = ["RecordLoadError", "RecordRepository"]
