"""Immutable square grid of nitrogenous bases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

ALPHABET = frozenset("ATCG")


class GridInvariantError(AssertionError):
    """Raised when a grid reaching the engine is not square or uses foreign symbols.

    Callers are expected to validate input first, so this signals a bug in the
    caller rather than bad user input.
    """


@dataclass(frozen=True)
class Grid:
    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        size = len(self.rows)
        if size == 0:
            raise GridInvariantError("grid must have at least one row")
        for index, row in enumerate(self.rows):
            if not isinstance(row, str):
                raise GridInvariantError(f"row {index} is not a string")
            if len(row) != size:
                raise GridInvariantError(
                    f"grid is not square: row {index} has {len(row)} symbols, expected {size}"
                )
            if not ALPHABET.issuperset(row):
                raise GridInvariantError(f"row {index} contains symbols outside ATCG")

    @classmethod
    def from_rows(cls, rows: Iterable[str] | "Grid") -> "Grid":
        if isinstance(rows, Grid):
            return rows
        if isinstance(rows, str):
            raise GridInvariantError("grid rows must be a sequence of strings, not a string")
        return cls(tuple(rows))

    @property
    def size(self) -> int:
        return len(self.rows)

    def __getitem__(self, row: int) -> str:
        return self.rows[row]


__all__ = ["ALPHABET", "Grid", "GridInvariantError"]
