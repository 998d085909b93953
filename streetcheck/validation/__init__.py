"""Width validator and result assembly."""

from streetcheck.validation.report import (
    Summary,
    ValidationResult,
    Violation,
    ViolationKind,
    assemble_result,
)
from streetcheck.validation.validator import validate

__all__ = [
    "Summary",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "assemble_result",
    "validate",
]
