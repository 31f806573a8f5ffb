"""External response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ClassificationResult(BaseModel):
    is_mutant: bool

    model_config = ConfigDict(extra="forbid")


class StatsResponse(BaseModel):
    count_mutant_dna: int
    count_human_dna: int
    ratio: float

    model_config = ConfigDict(extra="forbid")


class HealthResponse(BaseModel):
    status: str
    version: str


__all__ = ["ClassificationResult", "HealthResponse", "StatsResponse"]
