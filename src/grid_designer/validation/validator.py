"""Validator: runs a rule set against a subject and reports diagnostics."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from grid_designer.errors import ValidationError
from grid_designer.validation.diagnostic import Diagnostic

RuleFunc = Callable[[Any], list[Diagnostic]]


def validate(
    subject: Any, rules: Sequence[RuleFunc], extra_rules: Sequence[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run *rules* (and any *extra_rules*) against *subject*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    all_rules: list[RuleFunc] = list(rules)
    if extra_rules:
        all_rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in all_rules:
        diagnostics.extend(rule(subject))
    return diagnostics


def validate_or_raise(
    subject: Any, rules: Sequence[RuleFunc], extra_rules: Sequence[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(subject, rules, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
