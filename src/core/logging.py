"""Logging setup shared by the CLI and the API."""

from __future__ import annotations

import logging
import sys

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", format_string: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    resolved = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return
    logging.basicConfig(
        level=resolved,
        format=format_string or _DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


__all__ = ["configure_logging"]
