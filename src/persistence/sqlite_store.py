"""SQLite-backed ledger store."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

from persistence.errors import StoreTimeoutError, StoreUnavailableError
from persistence.models import AggregateCounters, AnalysisRecord, CounterKind

logger = logging.getLogger(__name__)

_SCHEMA = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS analyses (
    content_key TEXT PRIMARY KEY,
    is_mutant INTEGER NOT NULL,
    size INTEGER NOT NULL,
    recorded_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS counters (
    kind TEXT PRIMARY KEY,
    value INTEGER NOT NULL DEFAULT 0
);
INSERT OR IGNORE INTO counters (kind, value) VALUES ('mutant', 0);
INSERT OR IGNORE INTO counters (kind, value) VALUES ('human', 0);
"""

_BUSY_MARKERS = ("database is locked", "database is busy", "database table is locked")


class SqliteLedgerStore:
    def __init__(self, path: str | Path, *, timeout: float = 5.0) -> None:
        self._path = Path(path)
        self._timeout = timeout
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailableError(
                f"cannot create ledger directory {self._path.parent}: {exc}"
            ) from exc
        self._initialize()

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        # Autocommit mode; transactions are opened explicitly where needed.
        conn = sqlite3.connect(self._path, timeout=self._timeout, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise _translate(exc) from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise _translate(exc) from exc
        finally:
            conn.close()

    def _initialize(self) -> None:
        with self._connection() as conn:
            conn.executescript(_SCHEMA)

    def get(self, content_key: str) -> AnalysisRecord | None:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM analyses WHERE content_key = ?", (content_key,)
            ).fetchone()
        return _row_to_record(row) if row else None

    def create_if_absent(self, record: AnalysisRecord) -> bool:
        with self._connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            try:
                conn.execute(
                    "INSERT INTO analyses (content_key, is_mutant, size, recorded_at) VALUES (?, ?, ?, ?)",
                    (
                        record.content_key,
                        int(record.is_mutant),
                        record.size,
                        record.recorded_at.isoformat(),
                    ),
                )
                conn.execute(
                    "UPDATE counters SET value = value + 1 WHERE kind = ?",
                    (record.kind.value,),
                )
            except sqlite3.IntegrityError:
                conn.execute("ROLLBACK")
                logger.debug("Record %s already present", record.content_key[:12])
                return False
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        return True

    def counters(self) -> AggregateCounters:
        with self._connection() as conn:
            rows = conn.execute("SELECT kind, value FROM counters").fetchall()
        values = {row["kind"]: int(row["value"]) for row in rows}
        return AggregateCounters(
            mutant_count=values.get(CounterKind.MUTANT.value, 0),
            human_count=values.get(CounterKind.HUMAN.value, 0),
        )

    def count_records(self) -> int:
        with self._connection() as conn:
            row = conn.execute("SELECT COUNT(*) AS count FROM analyses").fetchone()
        return int(row["count"])


def _translate(exc: sqlite3.Error) -> Exception:
    message = str(exc).lower()
    if isinstance(exc, sqlite3.OperationalError) and any(
        marker in message for marker in _BUSY_MARKERS
    ):
        return StoreTimeoutError(str(exc))
    return StoreUnavailableError(str(exc))


def _row_to_record(row: sqlite3.Row) -> AnalysisRecord:
    return AnalysisRecord(
        content_key=row["content_key"],
        is_mutant=bool(row["is_mutant"]),
        size=int(row["size"]),
        recorded_at=datetime.fromisoformat(row["recorded_at"]),
    )


__all__ = ["SqliteLedgerStore"]
