"""Hashing helpers for ledger content keys."""

from __future__ import annotations

import hashlib
from typing import Iterable


def sha256_bytes(data: bytes) -> str:
    """Return hex sha256 of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def encode_grid(rows: Iterable[str]) -> bytes:
    """Encode rows as ``<len>:<row>\\n`` so row boundaries are part of the key."""
    return "".join(f"{len(row)}:{row}\n" for row in rows).encode("ascii")


def grid_content_key(rows: Iterable[str]) -> str:
    """Return the content key identifying a grid in the ledger."""
    return sha256_bytes(encode_grid(rows))


__all__ = ["encode_grid", "grid_content_key", "sha256_bytes"]
