"""Mutant/human totals computed from the record store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

from mutant_detector.storage.records import RecordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsReport:
    """Classification totals at one point in time."""
    mutant_count: int
    human_count: int
    ratio: float

    @property
    def total(self) -> int:
        return self.mutant_count + self.human_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count_mutant_dna": self.mutant_count,
            "count_human_dna": self.human_count,
            "ratio": self.ratio,
        }


def calculate_ratio(mutant_count: int, human_count: int) -> float:
    """Mutants per human, rounded half-up to two decimals.

    With no humans the ratio is the mutant count itself (0.0 when there
    are no records at all), which keeps the value numeric.
    """
    if human_count == 0:
        return float(mutant_count) if mutant_count > 0 else 0.0

    ratio = Decimal(mutant_count) / Decimal(human_count)
    return float(ratio.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class AggregateCounter:
    """Reads live totals from a record store on every call."""

    def __init__(self, store: RecordStore):
        self.store = store

    def stats(self) -> StatsReport:
        mutant_count = self.store.count(True)
        human_count = self.store.count(False)
        ratio = calculate_ratio(mutant_count, human_count)

        logger.debug("Stats - mutants: %d, humans: %d, ratio: %s", mutant_count, human_count, ratio)

        return StatsReport(mutant_count=mutant_count, human_count=human_count, ratio=ratio)
