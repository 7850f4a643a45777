"""Lint rules. Importing this package registers every built-in rule."""

from marklint.rules import linebreak_style, no_missing_blank_lines
from marklint.rules.base import MalformedConfigurationError, Rule, split_setting
from marklint.rules.registry import RuleRegistry, UnknownRuleError, rule

__all__ = [
    "MalformedConfigurationError",
    "Rule",
    "RuleRegistry",
    "UnknownRuleError",
    "linebreak_style",
    "no_missing_blank_lines",
    "rule",
    "split_setting",
]
