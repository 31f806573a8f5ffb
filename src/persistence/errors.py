"""Typed ledger failures.

``retryable`` tells the transport layer whether the caller may resubmit.
"""

from __future__ import annotations


class LedgerError(Exception):
    retryable = False


class StoreError(LedgerError):
    """Failure raised by a backing store."""


class StoreTimeoutError(StoreError):
    """The store did not answer within the configured timeout (lock contention, busy)."""

    retryable = True


class StoreUnavailableError(StoreError):
    """The store cannot be reached or is corrupt."""


class LedgerContentionError(LedgerError):
    """Retries were exhausted while resolving a create-or-fetch for one key."""

    retryable = True

    def __init__(self, content_key: str, attempts: int, message: str | None = None) -> None:
        self.content_key = content_key
        self.attempts = attempts
        super().__init__(
            message or f"ledger contention on {content_key[:12]} after {attempts} attempts"
        )


__all__ = [
    "LedgerContentionError",
    "LedgerError",
    "StoreError",
    "StoreTimeoutError",
    "StoreUnavailableError",
]
