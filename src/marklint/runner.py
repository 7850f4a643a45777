"""Runs configured rules over one document: Text + Tree → Rules → Diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from marklint.ast.nodes import Node
from marklint.models.diagnostics import Diagnostic, LintResult, RuleFailure
from marklint.rules import RuleRegistry, split_setting
from marklint.rules.base import SOURCE, Rule
from marklint.settings import Settings
from marklint.sink import DiagnosticSink, Document

logger = logging.getLogger("marklint.runner")


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings (for embedding hosts and scripts)."""
    if settings is None:
        settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())


class LintRunner:
    """Runs rules in sequence, each with a fresh sink.

    A rule that raises is isolated: its partial diagnostics are dropped,
    the error is recorded as a ``RuleFailure`` and the remaining rules
    still run.
    """

    def __init__(self, registry: type[RuleRegistry] = RuleRegistry) -> None:
        self._registry = registry

    def lint(self, text: str, tree: Node, config: Mapping[str, Any] | None = None) -> LintResult:
        """Lint ``text`` parsed as ``tree``.

        ``config`` maps rule ids to settings; with no config every
        registered rule runs with its default setting.
        """
        return self.lint_document(Document(text, tree), config)

    def lint_document(
        self, document: Document, config: Mapping[str, Any] | None = None
    ) -> LintResult:
        if config is None:
            config = {rule_id: None for rule_id in self._registry.available()}

        diagnostics: list[Diagnostic] = []
        failures: list[RuleFailure] = []
        for rule_id, setting in config.items():
            try:
                produced = self._run_rule(document, rule_id, setting)
            except Exception as exc:
                logger.exception("Rule '%s' failed", rule_id)
                failures.append(
                    RuleFailure(rule_id=rule_id, error_type=type(exc).__name__, message=str(exc))
                )
                continue
            diagnostics.extend(produced)

        logger.debug(
            "Linted document (%d chars): %d diagnostics, %d failures",
            len(document.text), len(diagnostics), len(failures),
        )
        return LintResult(diagnostics=diagnostics, failures=failures)

    def _run_rule(self, document: Document, rule_id: str, setting: Any) -> tuple[Diagnostic, ...]:
        rule: Rule = self._registry.get(rule_id)
        severity, option = split_setting(rule_id, setting)
        if severity is None:
            logger.debug("Rule '%s' is off", rule_id)
            return ()
        sink = DiagnosticSink(document, rule_id=rule.id, source=SOURCE, severity=severity)
        rule(document.tree, sink, option)
        logger.debug("Rule '%s' reported %d diagnostics", rule_id, len(sink))
        return sink.diagnostics
