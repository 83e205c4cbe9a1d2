"""Content fingerprints for DNA grids."""

from __future__ import annotations

import hashlib
import logging
from typing import Sequence

from mutant_detector.errors import FingerprintError

logger = logging.getLogger(__name__)

ROW_SEPARATOR = "|"
DEFAULT_ALGORITHM = "sha256"


def fingerprint(grid: Sequence[str], algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Compute a hex digest identifying the exact row sequence of a grid.

    Rows are joined with ``|``, which cannot appear in a valid grid, so
    row boundaries and row order both change the result.

    Args:
        grid: Sequence of row strings.
        algorithm: Name of a fixed-length hashlib algorithm.

    Returns:
        Lowercase hex digest (64 characters for SHA-256).

    Raises:
        FingerprintError: If the algorithm is unknown or has no fixed
            digest size.
    """
    try:
        digest = hashlib.new(algorithm)
    except ValueError as exc:
        logger.error("Digest algorithm %r is not available: %s", algorithm, exc)
        raise FingerprintError(f"Digest algorithm unavailable: {algorithm}") from exc

    if digest.digest_size == 0:
        logger.error("Digest algorithm %r has no fixed output size", algorithm)
        raise FingerprintError(f"Digest algorithm has variable length: {algorithm}")

    digest.update(ROW_SEPARATOR.join(grid).encode("utf-8"))
    return digest.hexdigest()
