"""CLI command groups."""

__all__ = ["config"]

from . import config
