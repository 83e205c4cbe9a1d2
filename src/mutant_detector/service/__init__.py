"""Cached classification and aggregate statistics."""

from mutant_detector.service.gateway import AnalysisCacheGateway
from mutant_detector.service.stats import AggregateCounter, StatsReport, calculate_ratio

__all__ = [
    "AnalysisCacheGateway",
    "AggregateCounter",
    "StatsReport",
    "calculate_ratio",
]
