"""DNA grid validation and conversion.

A grid is an N x N table of nucleotide symbols given as a sequence of
row strings, e.g. ``["ATGC", "CAGT", "TTAT", "AGAC"]``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from mutant_detector.errors import InvalidInput

ALPHABET = frozenset("ATCG")


def validate_grid(grid: Sequence[str]) -> tuple[str, ...]:
    """Check that a grid is square and only uses A, T, C and G.

    Args:
        grid: Sequence of row strings.

    Returns:
        The rows as an immutable tuple.

    Raises:
        InvalidInput: If the grid is not a sequence, is empty, not square, has a non-string
            row or contains a symbol outside the alphabet.
    """
    if grid is None:
        raise InvalidInput("DNA sequence cannot be null or empty", reason="empty")

    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise InvalidInput(
            f"DNA must be a sequence of row strings, got {type(grid).__name__}",
            reason="type",
        )

    if len(grid) == 0:
        raise InvalidInput("DNA sequence cannot be null or empty", reason="empty")

    rows = tuple(grid)
    n = len(rows)

    for i, row in enumerate(rows):
        if not isinstance(row, str):
            raise InvalidInput(
                f"DNA sequence row {i} must be a string, got {type(row).__name__}",
                reason="row_type",
                row=i,
            )

        if len(row) != n:
            raise InvalidInput(
                f"DNA must be NxN matrix. Expected size: {n}, but row {i} has size: {len(row)}",
                reason="size",
                row=i,
            )

        for j, symbol in enumerate(row):
            if symbol not in ALPHABET:
                raise InvalidInput(
                    f"DNA sequence contains invalid character {symbol!r} in row {i} "
                    f"at column {j}. Only A, T, C, G are allowed",
                    reason="symbol",
                    row=i,
                )

    return rows


def to_matrix(rows: Sequence[str]) -> np.ndarray:
    """Convert validated rows to an N x N array of single characters."""
    if not rows:
        return np.empty((0, 0), dtype="<U1")
    return np.array([list(row) for row in rows], dtype="<U1")
