"""Record stores for classification results."""

from mutant_detector.storage.records import ClassificationRecord, RecordStore
from mutant_detector.storage.memory import InMemoryRecordStore
from mutant_detector.storage.sqlite import SQLiteRecordStore

__all__ = [
    "ClassificationRecord",
    "RecordStore",
    "InMemoryRecordStore",
    "SQLiteRecordStore",
]
