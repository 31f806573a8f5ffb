"""Run detection with early termination.

Every cell is visited in row-major order as a candidate run start and checked
in four directions only: right, down, down-right and down-left. A run lying
along any of the opposite directions has its other endpoint as the leading
cell in one of these four, so the scan stays exhaustive without examining a
run from both ends.

Overlapping runs on one line count separately: five identical bases in a row
hold two runs of four and are enough on their own to classify as mutant.
"""

from __future__ import annotations

from typing import Iterable

from detection.grid import Grid

RUN_LENGTH = 4
MUTANT_RUN_THRESHOLD = 2

# (row delta, col delta)
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
)


def classify(grid: Grid | Iterable[str]) -> bool:
    """Return True when the grid holds more than one run of four equal bases."""
    return count_runs(grid, limit=MUTANT_RUN_THRESHOLD) >= MUTANT_RUN_THRESHOLD


def count_runs(grid: Grid | Iterable[str], limit: int | None = None) -> int:
    """Count runs of ``RUN_LENGTH`` identical bases, stopping once ``limit`` is reached."""
    matrix = Grid.from_rows(grid)
    size = matrix.size
    found = 0
    if size < RUN_LENGTH:
        return found

    for row in range(size):
        for col in range(size):
            for row_delta, col_delta in DIRECTIONS:
                if not _run_fits(size, row, col, row_delta, col_delta):
                    continue
                if _is_run(matrix, row, col, row_delta, col_delta):
                    found += 1
                    if limit is not None and found >= limit:
                        return found
    return found


def _run_fits(size: int, row: int, col: int, row_delta: int, col_delta: int) -> bool:
    span = RUN_LENGTH - 1
    end_row = row + span * row_delta
    end_col = col + span * col_delta
    return 0 <= end_row < size and 0 <= end_col < size


def _is_run(matrix: Grid, row: int, col: int, row_delta: int, col_delta: int) -> bool:
    expected = matrix[row][col]
    return all(
        matrix[row + step * row_delta][col + step * col_delta] == expected
        for step in range(1, RUN_LENGTH)
    )


__all__ = ["DIRECTIONS", "MUTANT_RUN_THRESHOLD", "RUN_LENGTH", "classify", "count_runs"]
