"""In-memory record store."""

from __future__ import annotations

import threading
from typing import Dict, Optional

from mutant_detector.storage.records import ClassificationRecord, RecordStore


class InMemoryRecordStore(RecordStore):
    """Dictionary-backed store, safe to share between threads."""

    def __init__(self):
        self._records: Dict[str, ClassificationRecord] = {}
        self._lock = threading.Lock()

    def find(self, fingerprint: str) -> Optional[ClassificationRecord]:
        with self._lock:
            return self._records.get(fingerprint)

    def save(self, record: ClassificationRecord) -> ClassificationRecord:
        with self._lock:
            return self._records.setdefault(record.fingerprint, record)

    def count(self, is_mutant: bool) -> int:
        with self._lock:
            return sum(1 for r in self._records.values() if r.is_mutant == is_mutant)

    def __repr__(self) -> str:
        with self._lock:
            size = len(self._records)
        return f"InMemoryRecordStore(records={size})"
