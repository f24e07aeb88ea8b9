"""Tests for registry validation rules and the validator."""

import pytest

from flowstyle.model import Diagnostic, PseudoClass, Registry, Severity, StyleProperty
from flowstyle.registry import DEFAULT_REGISTRY
from flowstyle.validation import (
    ValidationError,
    count_by_severity,
    failures,
    validate,
    validate_or_raise,
)
from flowstyle.validation import rules
from flowstyle.validation.rules import (
    check_default_values,
    check_identifiers,
    check_marker_collisions,
    check_prefix_namespace,
    check_stylesheet_coverage,
    check_unique_prefixes,
    check_unique_property_names,
    check_unique_variable_names,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _prop(name: str, variable: str | None = None, default: str = "0") -> StyleProperty:
    return StyleProperty(name=name, variable_name=variable or name, default_value=default)


HOVER = PseudoClass(name="hover", prefix="h")


def _registry(*props: StyleProperty, pseudo=(HOVER,)) -> Registry:
    return Registry(properties=props, pseudo_classes=tuple(pseudo))


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------


class TestDefaultRegistry:
    def test_no_diagnostics(self):
        assert validate(DEFAULT_REGISTRY) == []

    def test_validate_or_raise_passes(self):
        assert validate_or_raise() == []

    def test_every_producible_class_has_a_rule(self):
        assert check_stylesheet_coverage(DEFAULT_REGISTRY) == []


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestUniqueness:
    def test_duplicate_property(self):
        diags = check_unique_property_names(_registry(_prop("margin"), _prop("margin")))
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].subject == "margin"

    def test_shared_variable(self):
        diags = check_unique_variable_names(
            _registry(_prop("margin", "space"), _prop("padding", "space"))
        )
        assert len(diags) == 1
        assert "--space" in diags[0].message

    def test_duplicate_prefix(self):
        registry = _registry(
            _prop("margin"), pseudo=(HOVER, PseudoClass(name="hidden", prefix="h"))
        )
        diags = check_unique_prefixes(registry)
        assert len(diags) == 1
        assert diags[0].subject == "h"

    def test_duplicate_pseudo_name(self):
        registry = _registry(_prop("margin"), pseudo=(HOVER, PseudoClass(name="hover", prefix="x")))
        assert len(check_unique_prefixes(registry)) == 1


# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------


class TestNamespaces:
    def test_prefixed_variable_collides_with_base(self):
        registry = _registry(_prop("color"), _prop("highlight", "h-color"))
        diags = check_prefix_namespace(registry)
        assert len(diags) == 1
        assert diags[0].subject == "color"
        assert "--h-color" in diags[0].message

    def test_no_collision(self):
        assert check_prefix_namespace(_registry(_prop("color"), _prop("margin"))) == []

    def test_marker_collision(self):
        diags = check_marker_collisions(_registry(_prop("shape", "as-block")))
        assert len(diags) == 1
        assert "fs-as-block" in diags[0].message

    def test_invalid_identifiers(self):
        diags = check_identifiers(
            _registry(_prop("Margin"), pseudo=(PseudoClass(name="hover", prefix="1h"),))
        )
        assert len(diags) == 3
        assert all(d.is_error for d in diags)

    def test_empty_default_is_warning(self):
        diags = check_default_values(_registry(_prop("margin", default=" ")))
        assert len(diags) == 1
        assert diags[0].is_warning


# ---------------------------------------------------------------------------
# Stylesheet coverage
# ---------------------------------------------------------------------------


class TestCoverage:
    def test_selectors_ignore_declaration_bodies(self):
        css = ".fs {\n  opacity:var(--opacity, 0.5);\n}\n.fs-h-color:hover { color:red; }\n"
        assert rules._selectors(css) == {"fs", "fs-h-color"}

    def test_missing_rules_reported(self, monkeypatch):
        monkeypatch.setattr(rules, "generate_stylesheet", lambda registry: ".fs {\n}\n")
        diags = check_stylesheet_coverage(_registry(_prop("margin")))
        missing = {d.subject for d in diags}
        assert missing == {"fs-as-block", "fs-as-flex", "fs-margin", "fs-h-margin"}
        assert all(d.is_error for d in diags)


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------


class TestValidator:
    def test_raises_on_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise(_registry(_prop("margin"), _prop("margin")))
        assert len(exc_info.value.diagnostics) >= 1
        assert "Inconsistent style registry" in str(exc_info.value)
        assert "margin" in str(exc_info.value)

    def test_warnings_returned(self):
        result = validate_or_raise(_registry(_prop("margin", default="")))
        assert [d.rule for d in result] == ["check_default_values"]

    def test_extra_rules(self):
        def always_info(registry: Registry) -> list[Diagnostic]:
            return [Diagnostic(rule="custom", severity=Severity.INFO, message="hi")]

        diags = validate(DEFAULT_REGISTRY, extra_rules=[always_info])
        assert [d.rule for d in diags] == ["custom"]

    def test_strict_raises_on_warnings(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise(_registry(_prop("margin", default="")), strict=True)
        assert [d.rule for d in exc_info.value.diagnostics] == ["check_default_values"]

    def test_skip_leaves_rule_out(self):
        registry = _registry(_prop("margin", default=""))
        assert validate(registry, skip=["check_default_values"]) == []

    def test_skip_unknown_rule(self):
        with pytest.raises(ValueError, match="check_nothing"):
            validate(DEFAULT_REGISTRY, skip=["check_nothing"])

    def test_failures_and_counts(self):
        diags = [
            Diagnostic(rule="e", severity=Severity.ERROR, message="e"),
            Diagnostic(rule="w", severity=Severity.WARNING, message="w"),
            Diagnostic(rule="w", severity=Severity.WARNING, message="w2"),
        ]
        assert [d.rule for d in failures(diags)] == ["e"]
        assert [d.rule for d in failures(diags, strict=True)] == ["e", "w", "w"]
        assert count_by_severity(diags) == {
            Severity.ERROR: 1,
            Severity.WARNING: 2,
            Severity.INFO: 0,
        }


# ---------------------------------------------------------------------------
# Coverage helpers
# ---------------------------------------------------------------------------


class TestCoverageHelpers:
    def test_producible_classes(self):
        produced = rules.producible_classes(_registry(_prop("margin")))
        assert produced == {"fs", "fs-as-block", "fs-as-flex", "fs-margin", "fs-h-margin"}

    def test_default_registry_fully_covered(self):
        produced = rules.producible_classes(DEFAULT_REGISTRY)
        assert produced <= rules.stylesheet_classes(DEFAULT_REGISTRY)

    def test_unusual_default_does_not_break_coverage(self):
        registry = _registry(_prop("margin", default="a;b"))
        assert check_stylesheet_coverage(registry) == []
