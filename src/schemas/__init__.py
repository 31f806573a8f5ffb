"""Schema package for external contracts."""

from .requests import DnaInput, DnaValidationError, validate_dna
from .responses import ClassificationResult, HealthResponse, StatsResponse

__all__ = [
    "ClassificationResult",
    "DnaInput",
    "DnaValidationError",
    "HealthResponse",
    "StatsResponse",
    "validate_dna",
]
