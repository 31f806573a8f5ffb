"""Content-addressed analysis ledger.

Each distinct grid is classified and recorded once. Classification runs
before the store is touched; the store's unique-key create then decides the
winner when several callers race on the same grid, and losers re-fetch the
winning record instead of recomputing or counting twice.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from time import sleep
from typing import Callable, Iterable, TypeVar

from detection import Grid, classify
from persistence.contracts import LedgerStore
from persistence.errors import LedgerContentionError, StoreTimeoutError
from persistence.hashing import grid_content_key
from persistence.models import AnalysisRecord, LedgerOutcome, Stats

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_MAX_RETRIES = 3
_DEFAULT_RETRY_BACKOFF_MS = 20


class AnalysisLedger:
    def __init__(
        self,
        store: LedgerStore,
        *,
        classifier: Callable[[Grid], bool] = classify,
        max_retries: int = _DEFAULT_MAX_RETRIES,
        retry_backoff_ms: int = _DEFAULT_RETRY_BACKOFF_MS,
        sleep_func: Callable[[float], None] = sleep,
    ) -> None:
        self._store = store
        self._classifier = classifier
        self._max_retries = max(0, int(max_retries))
        self._retry_backoff_ms = max(0, int(retry_backoff_ms))
        self._sleep = sleep_func

    @property
    def store(self) -> LedgerStore:
        return self._store

    def analyze_or_fetch(self, grid: Grid | Iterable[str]) -> LedgerOutcome:
        """Return the grid's classification, recording it if the grid is new."""
        matrix = Grid.from_rows(grid)
        content_key = grid_content_key(matrix.rows)

        existing = self._with_retries(content_key, self._store.get, content_key)
        if existing is not None:
            logger.debug("Ledger hit for %s", content_key[:12])
            return LedgerOutcome(is_mutant=existing.is_mutant, was_new=False, record=existing)

        record = AnalysisRecord(
            content_key=content_key,
            is_mutant=self._classifier(matrix),
            size=matrix.size,
            recorded_at=datetime.now(timezone.utc),
        )
        created = self._with_retries(content_key, self._store.create_if_absent, record)
        if created:
            logger.info(
                "Recorded %s grid %s (n=%d)",
                record.kind.value,
                content_key[:12],
                record.size,
            )
            return LedgerOutcome(is_mutant=record.is_mutant, was_new=True, record=record)

        winner = self._refetch(content_key)
        logger.debug("Lost create race for %s, using stored record", content_key[:12])
        return LedgerOutcome(is_mutant=winner.is_mutant, was_new=False, record=winner)

    def stats(self) -> Stats:
        counters = self._with_retries("stats", self._store.counters)
        return Stats.from_counters(counters)

    def _refetch(self, content_key: str) -> AnalysisRecord:
        # The key was reported present, so a missing row means it is not yet visible.
        for attempt in range(self._max_retries + 1):
            record = self._with_retries(content_key, self._store.get, content_key)
            if record is not None:
                return record
            if attempt < self._max_retries:
                self._backoff(attempt)
        raise LedgerContentionError(
            content_key,
            self._max_retries + 1,
            f"record {content_key[:12]} reported present but not readable",
        )

    def _with_retries(self, content_key: str, func: Callable[..., T], *args: object) -> T:
        for attempt in range(self._max_retries + 1):
            try:
                return func(*args)
            except StoreTimeoutError as exc:
                if attempt >= self._max_retries:
                    raise LedgerContentionError(content_key, attempt + 1) from exc
                logger.warning(
                    "Store timeout on %s (attempt %d/%d): %s",
                    content_key[:12],
                    attempt + 1,
                    self._max_retries + 1,
                    exc,
                )
                self._backoff(attempt)
        raise RuntimeError("unexpected retry loop exhaustion")

    def _backoff(self, attempt: int) -> None:
        delay = (self._retry_backoff_ms / 1000.0) * (2**attempt)
        if delay > 0:
            self._sleep(delay)


__all__ = ["AnalysisLedger"]
