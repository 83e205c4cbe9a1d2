"""Utility modules for mutant_detector."""

from mutant_detector.utils.config import ServiceConfig
from mutant_detector.utils.logger_config import setup_logger

__all__ = [
    "ServiceConfig",
    "setup_logger",
]
