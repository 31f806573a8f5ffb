"""Core DNA analysis service for CLI/API reuse."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Sequence

from core.config import Settings, get_settings
from detection import Grid, classify
from persistence.contracts import LedgerStore
from persistence.ledger import AnalysisLedger
from persistence.memory_store import MemoryLedgerStore
from persistence.sqlite_store import SqliteLedgerStore
from schemas.requests import DnaInput, validate_dna
from schemas.responses import ClassificationResult, StatsResponse

logger = logging.getLogger(__name__)

RawGrid = DnaInput | Mapping[str, Any] | Sequence[str]


def classify_and_record(
    raw_grid: RawGrid,
    *,
    ledger: AnalysisLedger | None = None,
) -> ClassificationResult:
    """Validate a submission, classify it and record it once in the ledger."""
    dna = validate_dna(raw_grid)
    outcome = (ledger or get_ledger()).analyze_or_fetch(Grid(dna.rows))
    return ClassificationResult(is_mutant=outcome.is_mutant)


def classify_only(raw_grid: RawGrid) -> ClassificationResult:
    """Validate and classify without touching the ledger."""
    dna = validate_dna(raw_grid)
    return ClassificationResult(is_mutant=classify(Grid(dna.rows)))


def get_stats(*, ledger: AnalysisLedger | None = None) -> StatsResponse:
    stats = (ledger or get_ledger()).stats()
    return StatsResponse(
        count_mutant_dna=stats.mutant_count,
        count_human_dna=stats.human_count,
        ratio=stats.ratio,
    )


def build_store(settings: Settings) -> LedgerStore:
    if settings.ledger_backend == "memory":
        return MemoryLedgerStore()
    return SqliteLedgerStore(settings.ledger_path, timeout=settings.ledger_timeout)


def build_ledger(settings: Settings | None = None) -> AnalysisLedger:
    settings = settings or get_settings()
    store = build_store(settings)
    logger.info("Using %s ledger store", settings.ledger_backend)
    return AnalysisLedger(
        store,
        max_retries=settings.ledger_max_retries,
        retry_backoff_ms=settings.ledger_retry_backoff_ms,
    )


@lru_cache(maxsize=1)
def get_ledger() -> AnalysisLedger:
    """Process-wide ledger built from settings."""
    return build_ledger()


__all__ = [
    "build_ledger",
    "build_store",
    "classify_and_record",
    "classify_only",
    "get_ledger",
    "get_stats",
]
