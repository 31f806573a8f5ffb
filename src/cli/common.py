"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import typer

from persistence.errors import LedgerError
from schemas.requests import DnaInput, DnaValidationError, validate_dna


def load_dna_payload(rows: list[str] | None, dna_file: Path | None) -> DnaInput:
    if rows and dna_file:
        raise typer.BadParameter("Provide rows or --file, not both.")
    if dna_file is not None:
        payload: Any = _load_dna_file(dna_file)
    else:
        payload = {"dna": [row.strip() for row in rows or []]}
    try:
        return validate_dna(payload)
    except DnaValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def emit_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


@contextmanager
def ledger_errors() -> Iterator[None]:
    """Report ledger failures as a one-line error and exit code 1."""
    try:
        yield
    except LedgerError as exc:
        hint = " (retry later)" if exc.retryable else ""
        typer.echo(f"Error: ledger failure{hint}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _load_dna_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise typer.BadParameter(f"DNA file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}") from exc
    if isinstance(data, list):
        return {"dna": data}
    if not isinstance(data, dict):
        raise typer.BadParameter("DNA file must contain a JSON object or a list of rows.")
    return data


__all__ = ["emit_json", "ledger_errors", "load_dna_payload"]
