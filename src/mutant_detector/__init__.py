"""mutant_detector - cached detection of mutant DNA grids."""

__version__ = "0.1.0"

from mutant_detector.core.detector import is_mutant, count_runs
from mutant_detector.core.fingerprint import fingerprint
from mutant_detector.errors import InvalidInput, InternalFailure
from mutant_detector.service.gateway import AnalysisCacheGateway
from mutant_detector.service.stats import AggregateCounter, StatsReport

__all__ = [
    "is_mutant",
    "count_runs",
    "fingerprint",
    "InvalidInput",
    "InternalFailure",
    "AnalysisCacheGateway",
    "AggregateCounter",
    "StatsReport",
]
