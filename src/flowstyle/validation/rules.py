"""Validation rules for style registries.

Each rule is a function taking a Registry and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

import re
from collections import Counter

from flowstyle.model.catalog import Registry
from flowstyle.model.diagnostic import Diagnostic, Severity
from flowstyle.model.markers import BASE_CLASS, ElementShape
from flowstyle.model.style import Condition, Style
from flowstyle.resolver import resolve_styles
from flowstyle.stylesheet import generate_stylesheet

# A conservative CSS identifier: letters, digits and hyphens, starting with a letter.
_IDENT_RE = re.compile(r"^[a-z][a-z0-9-]*$")


def _duplicates(values: list[str]) -> list[str]:
    return [value for value, count in Counter(values).items() if count > 1]


# ---------------------------------------------------------------------------
# Uniqueness rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_unique_property_names(registry: Registry) -> list[Diagnostic]:
    """Every property name appears once."""
    names = [p.name for p in registry.properties]
    return [
        Diagnostic(
            rule="check_unique_property_names",
            severity=Severity.ERROR,
            message=f"Property '{name}' is registered more than once.",
            subject=name,
            fix="Remove the duplicate registry entry.",
        )
        for name in _duplicates(names)
    ]


def check_unique_variable_names(registry: Registry) -> list[Diagnostic]:
    """Two properties must never share a custom property."""
    names = [p.variable_name for p in registry.properties]
    return [
        Diagnostic(
            rule="check_unique_variable_names",
            severity=Severity.ERROR,
            message=f"Variable '--{name}' is used by more than one property.",
            subject=name,
        )
        for name in _duplicates(names)
    ]


def check_unique_prefixes(registry: Registry) -> list[Diagnostic]:
    """Pseudo-class names and prefixes appear once each."""
    diagnostics: list[Diagnostic] = []
    for name in _duplicates([pc.name for pc in registry.pseudo_classes]):
        diagnostics.append(
            Diagnostic(
                rule="check_unique_prefixes",
                severity=Severity.ERROR,
                message=f"Pseudo-class '{name}' is registered more than once.",
                subject=name,
            )
        )
    for prefix in _duplicates([pc.prefix for pc in registry.pseudo_classes]):
        diagnostics.append(
            Diagnostic(
                rule="check_unique_prefixes",
                severity=Severity.ERROR,
                message=f"Prefix '{prefix}' is shared by more than one pseudo-class.",
                subject=prefix,
                fix="Give each pseudo-class its own prefix.",
            )
        )
    return diagnostics


def check_prefix_namespace(registry: Registry) -> list[Diagnostic]:
    """Prefixed variables and classes never collide with unprefixed ones."""
    base_variables = {p.prefixed_variable() for p in registry.properties}
    base_classes = {p.class_name() for p in registry.properties}
    diagnostics: list[Diagnostic] = []
    for pseudo in registry.pseudo_classes:
        for prop in registry.properties:
            variable = prop.prefixed_variable(pseudo.prefix)
            class_name = prop.class_name(pseudo.prefix)
            if variable in base_variables or class_name in base_classes:
                diagnostics.append(
                    Diagnostic(
                        rule="check_prefix_namespace",
                        severity=Severity.ERROR,
                        message=(
                            f"'{variable}' ({pseudo.name}) collides with an "
                            "unprefixed property variable or class."
                        ),
                        subject=prop.name,
                        fix=f"Change the '{pseudo.prefix}' prefix or rename the property variable.",
                    )
                )
    return diagnostics


def check_marker_collisions(registry: Registry) -> list[Diagnostic]:
    """Property classes never reuse the base or shape marker class names."""
    markers = {BASE_CLASS} | {shape.class_name for shape in ElementShape}
    prefixes: list[str | None] = [None, *(pc.prefix for pc in registry.pseudo_classes)]
    diagnostics: list[Diagnostic] = []
    for prop in registry.properties:
        for prefix in prefixes:
            class_name = prop.class_name(prefix)
            if class_name in markers:
                diagnostics.append(
                    Diagnostic(
                        rule="check_marker_collisions",
                        severity=Severity.ERROR,
                        message=f"Class '{class_name}' for '{prop.name}' is also a marker class.",
                        subject=prop.name,
                        fix="Rename the property variable.",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Naming rules
# ---------------------------------------------------------------------------


def check_identifiers(registry: Registry) -> list[Diagnostic]:
    """Names used in selectors and variables must be plain CSS identifiers."""
    diagnostics: list[Diagnostic] = []
    for prop in registry.properties:
        for value in (prop.name, prop.variable_name):
            if not _IDENT_RE.match(value):
                diagnostics.append(
                    Diagnostic(
                        rule="check_identifiers",
                        severity=Severity.ERROR,
                        message=f"'{value}' is not a valid lowercase CSS identifier.",
                        subject=prop.name,
                    )
                )
    for pseudo in registry.pseudo_classes:
        for value in (pseudo.name, pseudo.prefix):
            if not _IDENT_RE.match(value):
                diagnostics.append(
                    Diagnostic(
                        rule="check_identifiers",
                        severity=Severity.ERROR,
                        message=f"'{value}' is not a valid lowercase CSS identifier.",
                        subject=pseudo.name,
                    )
                )
    return diagnostics


def check_default_values(registry: Registry) -> list[Diagnostic]:
    """Every property should have a non-empty fallback value."""
    return [
        Diagnostic(
            rule="check_default_values",
            severity=Severity.WARNING,
            message=f"Property '{prop.name}' has an empty default value.",
            subject=prop.name,
            fix="Use the CSS initial value, or 'inherit' for inherited properties.",
        )
        for prop in registry.properties
        if not prop.default_value.strip()
    ]


# ---------------------------------------------------------------------------
# Stylesheet consistency
# ---------------------------------------------------------------------------


def _selectors(css: str) -> set[str]:
    """Collect every class name that appears in a selector position."""
    found: set[str] = set()
    for line in css.splitlines():
        head = line.split("{", 1)[0] if "{" in line else ""
        for token in re.findall(r"\.([A-Za-z0-9_-]+)", head):
            found.add(token)
    return found


def stylesheet_classes(registry: Registry) -> set[str]:
    """Class names that have a rule in the stylesheet generated from *registry*."""
    return _selectors(generate_stylesheet(registry))


def producible_classes(registry: Registry) -> set[str]:
    """Every class name the resolver can emit for *registry*."""
    producible: set[str] = set()
    for shape in ElementShape:
        producible.update(resolve_styles([], shape=shape, registry=registry).classes)
    for prop in registry.properties:
        styles = [Style(prop, "initial")]
        styles += [
            Style(prop, "initial", Condition(pseudo))
            for pseudo in registry.pseudo_classes
        ]
        producible.update(resolve_styles(styles, registry=registry).classes)
    return producible


def check_stylesheet_coverage(registry: Registry) -> list[Diagnostic]:
    """Every class the resolver can emit has a rule in the generated stylesheet."""
    missing = producible_classes(registry) - stylesheet_classes(registry)
    return [
        Diagnostic(
            rule="check_stylesheet_coverage",
            severity=Severity.ERROR,
            message=f"Class '{name}' can be produced but has no stylesheet rule.",
            subject=name,
            fix="Regenerate the stylesheet from the same registry the resolver uses.",
        )
        for name in sorted(missing)
    ]


ALL_RULES = [
    check_unique_property_names,
    check_unique_variable_names,
    check_unique_prefixes,
    check_prefix_namespace,
    check_marker_collisions,
    check_identifiers,
    check_default_values,
    check_stylesheet_coverage,
]

RULES_BY_NAME = {rule.__name__: rule for rule in ALL_RULES}
