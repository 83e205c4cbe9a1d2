"""Cached DNA classification.

Each grid is fingerprinted and looked up in the record store before the
detector runs, so a grid seen before is answered from its stored record.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Sequence

from mutant_detector.core.detector import is_mutant
from mutant_detector.core.fingerprint import DEFAULT_ALGORITHM, fingerprint
from mutant_detector.core.grid import validate_grid
from mutant_detector.errors import InternalFailure, StorageError
from mutant_detector.storage.records import ClassificationRecord, RecordStore

logger = logging.getLogger(__name__)


class AnalysisCacheGateway:
    """Classifies grids, memoizing results by content fingerprint.

    Attributes:
        store: Record store used as the cache.
        hits: Lookups answered from the store by this instance.
        misses: Lookups that required running the detector.
    """

    def __init__(
        self,
        store: RecordStore,
        detector: Callable[[Sequence[str]], bool] = is_mutant,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.detector = detector
        self.algorithm = algorithm
        self.clock = clock
        self.hits = 0
        self.misses = 0
        self._lock = threading.Lock()

    def classify(self, grid: Sequence[str]) -> bool:
        """Return whether a grid is mutant, using the stored result if any.

        Args:
            grid: Sequence of row strings.

        Returns:
            True for a mutant grid.

        Raises:
            InvalidInput: If the grid is malformed.
            InternalFailure: If fingerprinting or the record store fails.
        """
        rows = validate_grid(grid)
        key = fingerprint(rows, self.algorithm)

        existing = self._call_store("lookup", self.store.find, key)
        if existing is not None:
            self._bump(hit=True)
            logger.debug("Cache hit %s... -> %s", key[:16], _verdict(existing.is_mutant))
            return existing.is_mutant

        self._bump(hit=False)
        result = bool(self.detector(rows))

        record = ClassificationRecord(
            fingerprint=key,
            is_mutant=result,
            grid_size=len(rows),
            analyzed_at=self.clock(),
        )
        self._call_store("save", self.store.save, record)

        logger.info(
            "Analyzed %dx%d DNA -> %s (hash %s...)",
            len(rows), len(rows), _verdict(result), key[:16],
        )
        return result

    def _bump(self, hit: bool) -> None:
        with self._lock:
            if hit:
                self.hits += 1
            else:
                self.misses += 1

    @staticmethod
    def _call_store(action: str, func, arg):
        try:
            return func(arg)
        except InternalFailure:
            raise
        except Exception as exc:
            logger.error("Record store %s failed: %s", action, exc)
            raise StorageError(f"Record store {action} failed") from exc

    def __repr__(self) -> str:
        return f"AnalysisCacheGateway(store={self.store!r}, hits={self.hits}, misses={self.misses})"


def _verdict(mutant: bool) -> str:
    return "MUTANT" if mutant else "HUMAN"
