"""Rule contract: plain check functions wrapped with metadata and option parsing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from marklint.ast.nodes import Node
from marklint.models.diagnostics import Severity
from marklint.sink import DiagnosticSink

SOURCE = "marklint"

# A check reads the tree and the sink's document and may only append to the sink.
CheckFunction = Callable[[Node, DiagnosticSink, Any], None]
OptionsParser = Callable[[Any], Any]

_SEVERITIES: dict[object, Severity | None] = {
    "off": None,
    0: None,
    "on": Severity.WARNING,
    "warn": Severity.WARNING,
    1: Severity.WARNING,
    "error": Severity.ERROR,
    2: Severity.ERROR,
}


class MalformedConfigurationError(ValueError):
    """Raised when a rule is given a setting it cannot interpret."""

    def __init__(self, rule_id: str, setting: object, reason: str) -> None:
        self.rule_id = rule_id
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid setting {setting!r} for rule '{rule_id}': {reason}")


def _pass_through(setting: Any) -> Any:
    return setting


@dataclass(frozen=True)
class Rule:
    """A named lint rule.

    Calling the rule parses its setting first, so a bad setting fails
    before the check has a chance to report anything.
    """

    id: str
    check: CheckFunction
    parse_options: OptionsParser = _pass_through
    description: str = ""

    @property
    def origin(self) -> str:
        return f"{SOURCE}:{self.id}"

    def options(self, setting: Any) -> Any:
        try:
            return self.parse_options(setting)
        except ValidationError as exc:
            reason = "; ".join(err["msg"] for err in exc.errors())
            raise MalformedConfigurationError(self.id, setting, reason) from exc
        except (TypeError, ValueError) as exc:
            raise MalformedConfigurationError(self.id, setting, str(exc)) from exc

    def __call__(self, tree: Node, sink: DiagnosticSink, setting: Any = None) -> None:
        self.check(tree, sink, self.options(setting))


def split_setting(rule_id: str, setting: Any) -> tuple[Severity | None, Any]:
    """Separate the severity part of a setting from the rule's own option.

    Accepted forms: ``False`` (off), ``True``/``None`` (on, defaults), a
    bare option, or ``[severity, option]`` / ``[severity]`` where severity
    is ``"off"``/``0``, ``"on"``/``"warn"``/``1`` or ``"error"``/``2``.
    Returns ``(None, None)`` for a disabled rule.
    """
    if setting is False:
        return None, None
    if setting is True or setting is None:
        return Severity.WARNING, None
    if isinstance(setting, (list, tuple)):
        if not 1 <= len(setting) <= 2:
            raise MalformedConfigurationError(
                rule_id, setting, "expected [severity] or [severity, option]"
            )
        level = setting[0]
        known = isinstance(level, (str, int)) and not isinstance(level, bool)
        if not known or level not in _SEVERITIES:
            raise MalformedConfigurationError(
                rule_id, setting, f"unknown severity {level!r}"
            )
        severity = _SEVERITIES[level]
        if severity is None:
            return None, None
        return severity, setting[1] if len(setting) == 2 else None
    return Severity.WARNING, setting
