"""Exception hierarchy for mutant_detector.

Input problems derive from ValueError and system problems from RuntimeError.
"""

from __future__ import annotations


class MutantDetectorError(Exception):
    """Base class for all package errors."""


class InvalidInput(MutantDetectorError, ValueError):
    """Raised when a DNA grid is malformed.

    Attributes:
        reason: Which structural property failed ("type", "empty",
            "row_type", "size" or "symbol").
        row: Index of the offending row, or None for whole-grid problems.
    """

    def __init__(self, message: str, reason: str, row: int | None = None):
        super().__init__(message)
        self.reason = reason
        self.row = row


class InternalFailure(MutantDetectorError, RuntimeError):
    """Raised for fingerprinting or persistence failures."""

    public_message = "Internal error while analyzing DNA"


class FingerprintError(InternalFailure):
    """The configured digest algorithm is unavailable."""

    public_message = "Error computing DNA hash"


class StorageError(InternalFailure):
    """The record store failed to answer a request."""
