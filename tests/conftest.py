# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from core.config import get_settings
from services.analysis import get_ledger


@pytest.fixture(autouse=True)
def isolated_ledger(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the process-wide ledger at a throwaway SQLite file for each test."""
    monkeypatch.setenv("LEDGER_BACKEND", "sqlite")
    monkeypatch.setenv("LEDGER_PATH", str(tmp_path / "service" / "ledger.sqlite"))
    monkeypatch.setenv("LEDGER_RETRY_BACKOFF_MS", "0")
    get_settings.cache_clear()
    get_ledger.cache_clear()
    yield
    get_settings.cache_clear()
    get_ledger.cache_clear()


MUTANT_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]
HUMAN_DNA = ["ATGCGA", "CAGTGC", "TTATTT", "AGACGG", "GCGTCA", "TCACTG"]


@pytest.fixture
def mutant_dna() -> list[str]:
    return list(MUTANT_DNA)


@pytest.fixture
def human_dna() -> list[str]:
    return list(HUMAN_DNA)
