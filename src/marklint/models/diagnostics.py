"""Diagnostic models with source position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class Severity(StrEnum):
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"  # reserved for rule crashes


class Position(BaseModel):
    """A point in the source: 1-based line/column plus 0-based offset."""

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    offset: int = Field(ge=0)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionRange(BaseModel):
    """Half-open source range; ``end`` points just past the last character."""

    start: Position
    end: Position

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class Diagnostic(BaseModel):
    """A style violation reported by a rule, with optional location."""

    message: str
    position: Position | None = None
    range: PositionRange | None = None
    rule_id: str | None = Field(None, alias="ruleId")
    source: str | None = None
    severity: Severity = Severity.WARNING

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def location_label(self) -> str:
        """``line:column`` or ``line:column-line:column``; empty when location-less."""
        if self.range is not None:
            return str(self.range)
        if self.position is not None:
            return str(self.position)
        return ""

    def __str__(self) -> str:
        label = self.location_label or "1:1"
        return f"{label}: {self.message}"


class RuleFailure(BaseModel):
    """A rule that crashed or was misconfigured for one document."""

    rule_id: str = Field(alias="ruleId")
    error_type: str = Field(alias="errorType")
    message: str
    severity: Severity = Severity.FATAL

    model_config = {"frozen": True, "populate_by_name": True}


class LintResult(BaseModel):
    """Outcome of running a set of rules over one document."""

    diagnostics: list[Diagnostic] = []
    failures: list[RuleFailure] = []

    @property
    def ok(self) -> bool:
        return not self.failures

    def messages(self) -> list[str]:
        """Diagnostics rendered as ``line:column: message`` strings."""
        return [str(d) for d in self.diagnostics]
