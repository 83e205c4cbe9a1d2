"""Core grid validation, run detection and fingerprinting."""

from mutant_detector.core.grid import ALPHABET, validate_grid, to_matrix
from mutant_detector.core.detector import (
    SEQUENCE_LENGTH,
    MIN_SEQUENCES_FOR_MUTANT,
    count_runs,
    is_mutant,
    search_runs,
)
from mutant_detector.core.fingerprint import fingerprint

__all__ = [
    "ALPHABET",
    "validate_grid",
    "to_matrix",
    "SEQUENCE_LENGTH",
    "MIN_SEQUENCES_FOR_MUTANT",
    "count_runs",
    "is_mutant",
    "search_runs",
    "fingerprint",
]
