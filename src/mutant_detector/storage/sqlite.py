"""Durable record store backed by SQLite.

The fingerprint is the primary key, so when several writers race to store
the same grid exactly one insert wins and the others read the winner back.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from mutant_detector.errors import StorageError
from mutant_detector.storage.records import ClassificationRecord, RecordStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS dna_records (
    dna_hash TEXT PRIMARY KEY,
    is_mutant INTEGER NOT NULL,
    sequence_size INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_is_mutant ON dna_records (is_mutant);
"""


class SQLiteRecordStore(RecordStore):
    """Record store persisted in a SQLite database file.

    A new connection is opened for every operation, so one instance can be
    shared by many threads.
    """

    def __init__(self, path: str | Path, timeout: float = 5.0):
        """Open (and if needed create) the database.

        Args:
            path: Database file. Parent directories are created.
            timeout: Seconds to wait on a locked database before failing.

        Raises:
            ValueError: If path is ":memory:". Each operation opens its own
                connection, so an in-memory database would not survive between calls.
        """
        if str(path) == ":memory:":
            raise ValueError(
                "SQLiteRecordStore needs a database file; use InMemoryRecordStore for ':memory:'"
            )

        self.path = Path(path)
        self.timeout = timeout
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with self._get_connection() as conn:
            conn.executescript(_SCHEMA)

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        try:
            with closing(sqlite3.connect(self.path, timeout=self.timeout)) as conn:
                with conn:
                    yield conn
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as exc:
            logger.error("SQLite error on %s: %s", self.path, exc)
            raise StorageError(f"Record store failure: {exc}") from exc

    def find(self, fingerprint: str) -> Optional[ClassificationRecord]:
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT dna_hash, is_mutant, sequence_size, created_at "
                "FROM dna_records WHERE dna_hash = ?",
                (fingerprint,),
            ).fetchone()

        if row is None:
            return None

        return ClassificationRecord(
            fingerprint=row[0],
            is_mutant=bool(row[1]),
            grid_size=row[2],
            analyzed_at=datetime.fromisoformat(row[3]),
        )

    def save(self, record: ClassificationRecord) -> ClassificationRecord:
        try:
            with self._get_connection() as conn:
                conn.execute(
                    "INSERT INTO dna_records (dna_hash, is_mutant, sequence_size, created_at) "
                    "VALUES (?, ?, ?, ?)",
                    (
                        record.fingerprint,
                        int(record.is_mutant),
                        record.grid_size,
                        record.analyzed_at.isoformat(),
                    ),
                )
        except sqlite3.IntegrityError:
            logger.debug("Record %s already stored, keeping existing", record.fingerprint[:16])
            existing = self.find(record.fingerprint)
            if existing is None:
                raise StorageError(f"Conflicting insert for {record.fingerprint} left no record")
            return existing

        return record

    def count(self, is_mutant: bool) -> int:
        with self._get_connection() as conn:
            (total,) = conn.execute(
                "SELECT COUNT(*) FROM dna_records WHERE is_mutant = ?",
                (int(is_mutant),),
            ).fetchone()
        return int(total)

    def __repr__(self) -> str:
        return f"SQLiteRecordStore({self.path})"
