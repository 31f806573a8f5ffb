"""Persistence subsystem exports."""

from persistence.errors import (
    LedgerContentionError,
    LedgerError,
    StoreError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from persistence.ledger import AnalysisLedger
from persistence.memory_store import MemoryLedgerStore
from persistence.models import AggregateCounters, AnalysisRecord, LedgerOutcome, Stats
from persistence.sqlite_store import SqliteLedgerStore

__all__ = [
    "AggregateCounters",
    "AnalysisLedger",
    "AnalysisRecord",
    "LedgerContentionError",
    "LedgerError",
    "LedgerOutcome",
    "MemoryLedgerStore",
    "SqliteLedgerStore",
    "Stats",
    "StoreError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
