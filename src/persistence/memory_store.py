"""In-process ledger store for tests and single-process runs."""

from __future__ import annotations

import threading

from persistence.models import AggregateCounters, AnalysisRecord, CounterKind


class MemoryLedgerStore:
    def __init__(self) -> None:
        self._records: dict[str, AnalysisRecord] = {}
        self._counts = {CounterKind.MUTANT: 0, CounterKind.HUMAN: 0}
        # Guards only the check-and-insert and counter bump, never classification.
        self._lock = threading.Lock()

    def get(self, content_key: str) -> AnalysisRecord | None:
        return self._records.get(content_key)

    def create_if_absent(self, record: AnalysisRecord) -> bool:
        with self._lock:
            if record.content_key in self._records:
                return False
            self._records[record.content_key] = record
            self._counts[record.kind] += 1
            return True

    def counters(self) -> AggregateCounters:
        with self._lock:
            return AggregateCounters(
                mutant_count=self._counts[CounterKind.MUTANT],
                human_count=self._counts[CounterKind.HUMAN],
            )

    def count_records(self) -> int:
        return len(self._records)


__all__ = ["MemoryLedgerStore"]
