"""Rule registry: look up lint rules by id."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from marklint.rules.base import CheckFunction, OptionsParser, Rule


class UnknownRuleError(KeyError):
    """Raised when a requested rule is not registered."""

    def __init__(self, rule_id: str, available: list[str]) -> None:
        self.rule_id = rule_id
        self.available = available
        super().__init__(f"Unknown rule '{rule_id}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        return str(self.args[0])


class RuleRegistry:
    """Registry of lint rules, filled at import time and read-only afterwards."""

    _rules: dict[str, Rule] = {}

    @classmethod
    def register(cls, rule: Rule) -> Rule:
        if rule.id in cls._rules and cls._rules[rule.id] is not rule:
            raise ValueError(f"Rule '{rule.id}' is already registered")
        cls._rules[rule.id] = rule
        return rule

    @classmethod
    def get(cls, rule_id: str) -> Rule:
        if rule_id not in cls._rules:
            raise UnknownRuleError(rule_id, available=cls.available())
        return cls._rules[rule_id]

    @classmethod
    def available(cls) -> list[str]:
        """List registered rule ids."""
        return sorted(cls._rules.keys())

    @classmethod
    def all(cls) -> list[Rule]:
        return [cls._rules[rule_id] for rule_id in cls.available()]


def rule(
    rule_id: str,
    *,
    options: OptionsParser | None = None,
    description: str = "",
) -> Callable[[CheckFunction], Rule]:
    """Decorator turning a check function into a registered ``Rule``."""

    def decorate(check: CheckFunction) -> Rule:
        doc = (check.__doc__ or "").strip()
        built = Rule(
            id=rule_id,
            check=check,
            description=description or (doc.splitlines()[0] if doc else ""),
        )
        if options is not None:
            built = replace(built, parse_options=options)
        return RuleRegistry.register(built)

    return decorate
