"""Lightweight ledger records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class CounterKind(str, Enum):
    MUTANT = "mutant"
    HUMAN = "human"

    @classmethod
    def for_result(cls, is_mutant: bool) -> "CounterKind":
        return cls.MUTANT if is_mutant else cls.HUMAN


@dataclass(frozen=True)
class AnalysisRecord:
    content_key: str
    is_mutant: bool
    size: int
    recorded_at: datetime

    @property
    def kind(self) -> CounterKind:
        return CounterKind.for_result(self.is_mutant)


@dataclass(frozen=True)
class AggregateCounters:
    mutant_count: int = 0
    human_count: int = 0


def compute_ratio(mutant_count: int, human_count: int) -> float:
    """Share of mutant grids among all recorded grids, 0.0 when nothing is recorded."""
    total = mutant_count + human_count
    if total <= 0:
        return 0.0
    return mutant_count / total


@dataclass(frozen=True)
class Stats:
    mutant_count: int
    human_count: int
    ratio: float

    @classmethod
    def from_counters(cls, counters: AggregateCounters) -> "Stats":
        return cls(
            mutant_count=counters.mutant_count,
            human_count=counters.human_count,
            ratio=compute_ratio(counters.mutant_count, counters.human_count),
        )


@dataclass(frozen=True)
class LedgerOutcome:
    is_mutant: bool
    was_new: bool
    record: AnalysisRecord


__all__ = [
    "AggregateCounters",
    "AnalysisRecord",
    "CounterKind",
    "LedgerOutcome",
    "Stats",
    "compute_ratio",
]
