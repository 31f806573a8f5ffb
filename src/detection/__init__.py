"""Mutant pattern detection over square base grids."""

from detection.engine import (
    DIRECTIONS,
    MUTANT_RUN_THRESHOLD,
    RUN_LENGTH,
    classify,
    count_runs,
)
from detection.grid import ALPHABET, Grid, GridInvariantError

__all__ = [
    "ALPHABET",
    "DIRECTIONS",
    "Grid",
    "GridInvariantError",
    "MUTANT_RUN_THRESHOLD",
    "RUN_LENGTH",
    "classify",
    "count_runs",
]
