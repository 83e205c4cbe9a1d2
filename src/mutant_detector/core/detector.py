"""Mutant detection by scanning a DNA grid for runs of four.

A run is four identical consecutive symbols along one of four axes:
horizontal, vertical, descending diagonal and ascending diagonal. A grid
is mutant when it contains at least two runs. Runs may overlap, so five
identical symbols in a row already count as two.

The search visits the axes in a fixed order and stops as soon as the
threshold is reached, so unexamined lines and axes are never scanned.
"""

from __future__ import annotations

from typing import Callable, Iterator, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from mutant_detector.core.grid import to_matrix, validate_grid

SEQUENCE_LENGTH = 4
MIN_SEQUENCES_FOR_MUTANT = 2

AxisGenerator = Callable[[np.ndarray], Iterator[np.ndarray]]


def horizontal_lines(matrix: np.ndarray) -> Iterator[np.ndarray]:
    """Yield rows, left to right."""
    if matrix.shape[1] < SEQUENCE_LENGTH:
        return
    for row in matrix:
        yield row


def vertical_lines(matrix: np.ndarray) -> Iterator[np.ndarray]:
    """Yield columns, top to bottom."""
    if matrix.shape[0] < SEQUENCE_LENGTH:
        return
    for col in matrix.T:
        yield col


def _diagonals(matrix: np.ndarray) -> Iterator[np.ndarray]:
    height, width = matrix.shape
    for offset in range(-(height - SEQUENCE_LENGTH), width - SEQUENCE_LENGTH + 1):
        yield np.diagonal(matrix, offset=offset)


def descending_diagonals(matrix: np.ndarray) -> Iterator[np.ndarray]:
    """Yield every top-left to bottom-right diagonal long enough for a run."""
    yield from _diagonals(matrix)


def ascending_diagonals(matrix: np.ndarray) -> Iterator[np.ndarray]:
    """Yield every top-right to bottom-left diagonal long enough for a run."""
    yield from _diagonals(np.fliplr(matrix))


AXES: tuple[AxisGenerator, ...] = (
    horizontal_lines,
    vertical_lines,
    descending_diagonals,
    ascending_diagonals,
)


def count_line_runs(line: np.ndarray) -> int:
    """Count width-4 windows whose first symbol matches the other three.

    Overlapping windows count separately.
    """
    if len(line) < SEQUENCE_LENGTH:
        return 0
    windows = sliding_window_view(line, SEQUENCE_LENGTH)
    matches = (windows[:, 1:] == windows[:, :1]).all(axis=1)
    return int(np.count_nonzero(matches))


def search_runs(
    matrix: np.ndarray,
    axes: Sequence[AxisGenerator] = AXES,
    limit: int | None = None,
) -> int:
    """Count runs across the given axes, stopping once ``limit`` is reached.

    Args:
        matrix: 2D array of single-character symbols.
        axes: Axis generators, scanned in order.
        limit: Stop scanning as soon as this many runs are found. The
            result is clamped to it. None scans the whole grid.

    Returns:
        Number of runs found.
    """
    found = 0
    for axis in axes:
        for line in axis(matrix):
            found += count_line_runs(line)
            if limit is not None and found >= limit:
                return limit
    return found


def count_runs(grid: Sequence[str], limit: int | None = None) -> int:
    """Count runs of four in a grid.

    Args:
        grid: Sequence of row strings.
        limit: Optional early-exit threshold.

    Returns:
        Number of runs, at most ``limit`` when given.

    Raises:
        InvalidInput: If the grid is malformed.
    """
    rows = validate_grid(grid)
    return search_runs(to_matrix(rows), limit=limit)


def is_mutant(grid: Sequence[str]) -> bool:
    """Return True if the grid holds at least two runs of four.

    Grids smaller than 4x4 can hold no run and are never mutant.

    Raises:
        InvalidInput: If the grid is malformed.
    """
    return count_runs(grid, limit=MIN_SEQUENCES_FOR_MUTANT) >= MIN_SEQUENCES_FOR_MUTANT
