"""Run the registry rules and turn their diagnostics into a verdict."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import Callable

from flowstyle.errors import FlowStyleError
from flowstyle.model.catalog import Registry
from flowstyle.model.diagnostic import Diagnostic, Severity
from flowstyle.registry import DEFAULT_REGISTRY
from flowstyle.validation.rules import ALL_RULES, RULES_BY_NAME

logger = logging.getLogger(__name__)

RuleFunc = Callable[[Registry], list[Diagnostic]]


class ValidationError(FlowStyleError):
    """The registries cannot be used to generate and resolve styles safely."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        subjects = sorted({d.subject or d.rule for d in diagnostics})
        super().__init__(
            f"Inconsistent style registry ({len(diagnostics)} problem(s)): "
            + ", ".join(subjects)
        )


def validate(
    registry: Registry = DEFAULT_REGISTRY,
    extra_rules: list[RuleFunc] | None = None,
    skip: Iterable[str] = (),
) -> list[Diagnostic]:
    """Run the built-in rules, minus any named in *skip*, then *extra_rules*.

    Raises:
        ValueError: *skip* names a rule that does not exist.
    """
    skipped = set(skip)
    unknown = skipped - RULES_BY_NAME.keys()
    if unknown:
        raise ValueError(f"Unknown validation rule(s): {', '.join(sorted(unknown))}")

    rules = [rule for rule in ALL_RULES if rule.__name__ not in skipped]
    rules.extend(extra_rules or [])
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        found = rule(registry)
        logger.debug("%s: %d diagnostic(s)", rule.__name__, len(found))
        diagnostics.extend(found)
    return diagnostics


def failures(diagnostics: Iterable[Diagnostic], strict: bool = False) -> list[Diagnostic]:
    """Diagnostics that make a registry unusable; with *strict*, warnings too."""
    return [d for d in diagnostics if d.is_error or (strict and d.is_warning)]


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts[severity] for severity in Severity}


def validate_or_raise(
    registry: Registry = DEFAULT_REGISTRY,
    extra_rules: list[RuleFunc] | None = None,
    strict: bool = False,
) -> list[Diagnostic]:
    """Validate *registry*, raising :class:`ValidationError` on any failure.

    Returns every diagnostic when nothing fails, so callers can still log
    warnings and info.
    """
    diagnostics = validate(registry, extra_rules=extra_rules)
    failed = failures(diagnostics, strict=strict)
    if failed:
        raise ValidationError(failed)
    return diagnostics
