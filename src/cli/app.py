"""Typer CLI entrypoint for DNA analysis."""

from __future__ import annotations

from pathlib import Path

import typer

from cli.commands import config as config_commands
from dnascan import __version__

app = typer.Typer(
    help="Detect mutant DNA and inspect the analysis ledger.",
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    add_completion=True,
)
app.add_typer(config_commands.app, name="config")


@app.callback()
def root(
    ctx: typer.Context,
    version_flag: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Print the version and exit",
    ),
) -> None:
    if version_flag:
        typer.echo(__version__)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    _configure_logging()


@app.command(help="Classify a DNA matrix and record it in the ledger")
def analyze(
    rows: list[str] | None = typer.Argument(
        None,
        metavar="ROW...",
        help="Matrix rows, e.g. ATGCGA CAGTGC ...",
    ),
    dna_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        dir_okay=False,
        help='JSON file holding {"dna": [...]} or a list of rows',
    ),
    record: bool = typer.Option(
        True,
        "--record/--no-record",
        help="Record the result in the ledger",
    ),
    json_out: bool = typer.Option(
        False,
        "--json",
        help="Output JSON",
    ),
) -> None:
    from cli.common import emit_json, ledger_errors, load_dna_payload
    from services.analysis import classify_and_record, classify_only

    dna = load_dna_payload(rows, dna_file)
    with ledger_errors():
        result = classify_and_record(dna) if record else classify_only(dna)
    if json_out:
        emit_json(result.model_dump())
        return
    typer.echo("mutant" if result.is_mutant else "human")


@app.command(help="Show aggregate ledger statistics")
def stats() -> None:
    from cli.common import emit_json, ledger_errors
    from services.analysis import get_stats

    with ledger_errors():
        payload = get_stats().model_dump()
    emit_json(payload)


@app.command(help="Run the HTTP API")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", min=1, max=65535, help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    import uvicorn

    uvicorn.run("api.main:app", host=host, port=port, reload=reload)


def _configure_logging() -> None:
    from core import configure_logging, get_settings

    configure_logging(get_settings().log_level)


def main() -> None:
    app()


__all__ = ["app", "main"]
