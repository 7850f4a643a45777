"""Pydantic models for diagnostics and lint results."""

from marklint.models.diagnostics import (
    Diagnostic,
    LintResult,
    Position,
    PositionRange,
    RuleFailure,
    Severity,
)

__all__ = [
    "Diagnostic",
    "LintResult",
    "Position",
    "PositionRange",
    "RuleFailure",
    "Severity",
]
