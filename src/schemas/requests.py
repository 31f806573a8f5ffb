"""External request schemas for DNA submissions."""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_VALID_DNA_PATTERN = re.compile(r"[ATCG]+")


class DnaValidationError(ValueError):
    """Submitted DNA is empty, not NxN, or uses bases outside A, T, C, G."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class DnaInput(BaseModel):
    dna: list[str | None] | None = Field(default=None, validate_default=True)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("dna")
    @classmethod
    def _validate_matrix(cls, value: list[str | None] | None) -> list[str | None]:
        if not value:
            raise ValueError("DNA sequence cannot be null or empty")
        size = len(value)
        for index, sequence in enumerate(value):
            if sequence is None:
                raise ValueError("DNA sequence row cannot be null")
            if len(sequence) != size:
                raise ValueError(
                    f"DNA must be NxN matrix. Expected size: {size}, "
                    f"but row {index} has size: {len(sequence)}"
                )
            if not _VALID_DNA_PATTERN.fullmatch(sequence):
                raise ValueError(
                    f"DNA sequence contains invalid characters in row {index}. "
                    "Only A, T, C, G are allowed"
                )
        return value

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple(row for row in self.dna or [] if row is not None)


def validate_dna(raw: DnaInput | Mapping[str, Any] | Sequence[str]) -> DnaInput:
    """Coerce a raw submission into a validated ``DnaInput``."""
    if isinstance(raw, DnaInput):
        return raw
    payload = raw if isinstance(raw, Mapping) else {"dna": list(raw)}
    try:
        return DnaInput.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        raise DnaValidationError(_first_message(errors), errors) from exc


def _first_message(errors: list[dict[str, Any]]) -> str:
    if not errors:
        return "Invalid DNA input"
    first = errors[0]
    original = (first.get("ctx") or {}).get("error")
    if original is not None:
        return str(original)
    return str(first.get("msg") or "Invalid DNA input")


__all__ = ["DnaInput", "DnaValidationError", "validate_dna"]
