"""Classification records and the record store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ClassificationRecord:
    """Persisted outcome of analyzing one distinct grid.

    Attributes:
        fingerprint: Content hash of the grid, used as the key.
        is_mutant: Detector verdict.
        grid_size: Number of rows (N) of the grid.
        analyzed_at: When the grid was first analyzed.
    """
    fingerprint: str
    is_mutant: bool
    grid_size: int
    analyzed_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["analyzed_at"] = self.analyzed_at.isoformat()
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ClassificationRecord':
        analyzed_at = d["analyzed_at"]
        if isinstance(analyzed_at, str):
            analyzed_at = datetime.fromisoformat(analyzed_at)
        return cls(
            fingerprint=d["fingerprint"],
            is_mutant=bool(d["is_mutant"]),
            grid_size=int(d["grid_size"]),
            analyzed_at=analyzed_at,
        )


class RecordStore(ABC):
    """Write-once store of classification records keyed by fingerprint.

    Implementations must keep at most one record per fingerprint. Saving a
    fingerprint that already exists returns the stored record unchanged.
    """

    @abstractmethod
    def find(self, fingerprint: str) -> Optional[ClassificationRecord]:
        """Return the record for a fingerprint, or None."""

    @abstractmethod
    def save(self, record: ClassificationRecord) -> ClassificationRecord:
        """Store a record unless its fingerprint exists; return the stored one."""

    @abstractmethod
    def count(self, is_mutant: bool) -> int:
        """Count records with the given verdict."""

    def close(self) -> None:
        pass

    def __len__(self) -> int:
        return self.count(True) + self.count(False)

    def __enter__(self) -> 'RecordStore':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
