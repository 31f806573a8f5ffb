from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cli.app import app
from dnascan import __version__
from persistence.errors import LedgerContentionError, StoreUnavailableError

runner = CliRunner()


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_analyze_records_and_stats_report(mutant_dna: list[str], human_dna: list[str]) -> None:
    result = runner.invoke(app, ["analyze", *mutant_dna])
    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1] == "mutant"

    result = runner.invoke(app, ["analyze", *human_dna])
    assert result.exit_code == 0, result.output
    assert result.output.strip().splitlines()[-1] == "human"

    runner.invoke(app, ["analyze", *human_dna])

    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {"count_mutant_dna": 1, "count_human_dna": 1, "ratio": 0.5}


def test_analyze_from_file_without_recording(tmp_path: Path, mutant_dna: list[str]) -> None:
    dna_file = tmp_path / "dna.json"
    dna_file.write_text(json.dumps({"dna": mutant_dna}), encoding="utf-8")

    result = runner.invoke(app, ["analyze", "--file", str(dna_file), "--no-record", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"is_mutant": True}

    stats = json.loads(runner.invoke(app, ["stats"]).output)
    assert stats["count_mutant_dna"] == 0


def test_analyze_rejects_invalid_matrix() -> None:
    result = runner.invoke(app, ["analyze", "ATG", "CA", "TTT"])
    assert result.exit_code != 0
    assert "NxN" in result.output


def test_config_show_lists_ledger_settings() -> None:
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["ledger_backend"] == "sqlite"


def test_stats_reports_unavailable_store(monkeypatch) -> None:
    def broken_stats():
        raise StoreUnavailableError("unable to open database file")

    monkeypatch.setattr("services.analysis.get_stats", broken_stats)

    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 1
    assert "unable to open database file" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_analyze_reports_ledger_contention(monkeypatch, mutant_dna: list[str]) -> None:
    def contended(_dna):
        raise LedgerContentionError("abc123", 4)

    monkeypatch.setattr("services.analysis.classify_and_record", contended)

    result = runner.invoke(app, ["analyze", *mutant_dna])
    assert result.exit_code == 1
    assert "retry later" in result.output
