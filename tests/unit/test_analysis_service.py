from __future__ import annotations

import pytest

from core.config import Settings
from persistence.ledger import AnalysisLedger
from persistence.memory_store import MemoryLedgerStore
from persistence.sqlite_store import SqliteLedgerStore
from schemas.requests import DnaValidationError
from services.analysis import (
    build_ledger,
    classify_and_record,
    classify_only,
    get_ledger,
    get_stats,
)


def test_classify_and_record_uses_injected_ledger(mutant_dna: list[str]) -> None:
    ledger = AnalysisLedger(MemoryLedgerStore())

    result = classify_and_record({"dna": mutant_dna}, ledger=ledger)

    assert result.is_mutant is True
    stats = get_stats(ledger=ledger)
    assert stats.count_mutant_dna == 1
    assert stats.count_human_dna == 0
    assert stats.ratio == 1.0


def test_idempotent_recording(human_dna: list[str]) -> None:
    classify_and_record({"dna": human_dna})
    classify_and_record(human_dna)

    stats = get_stats()
    assert (stats.count_mutant_dna, stats.count_human_dna) == (0, 1)


def test_invalid_input_never_reaches_the_ledger() -> None:
    with pytest.raises(DnaValidationError):
        classify_and_record({"dna": ["ATG", "CA"]})
    assert get_ledger().store.count_records() == 0


def test_classify_only_does_not_record(mutant_dna: list[str]) -> None:
    assert classify_only(mutant_dna).is_mutant is True
    assert get_stats().count_mutant_dna == 0


def test_default_ledger_follows_settings() -> None:
    ledger = get_ledger()
    assert isinstance(ledger.store, SqliteLedgerStore)
    assert ledger.store.path.name == "ledger.sqlite"
    assert get_ledger() is ledger


def test_build_ledger_memory_backend() -> None:
    settings = Settings(LEDGER_BACKEND="memory")
    ledger = build_ledger(settings)
    assert isinstance(ledger.store, MemoryLedgerStore)
