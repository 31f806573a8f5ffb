"""Persistence protocol contracts."""

from __future__ import annotations

from typing import Protocol

from persistence.models import AggregateCounters, AnalysisRecord


class LedgerStore(Protocol):
    def get(self, content_key: str) -> AnalysisRecord | None: ...

    def create_if_absent(self, record: AnalysisRecord) -> bool:
        """Insert the record and bump its counter in one atomic step.

        Returns False, with no side effects, when the key already exists.
        """
        ...

    def counters(self) -> AggregateCounters: ...

    def count_records(self) -> int: ...


__all__ = ["LedgerStore"]
