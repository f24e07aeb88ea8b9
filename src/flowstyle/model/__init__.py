"""flowstyle model layer -- public type re-exports."""

from flowstyle.model.catalog import Registry
from flowstyle.model.diagnostic import Diagnostic, Severity
from flowstyle.model.markers import BASE_CLASS, ElementShape
from flowstyle.model.property import CLASS_NAMESPACE, StyleProperty
from flowstyle.model.pseudo_class import PseudoClass
from flowstyle.model.resolved import ResolvedStyle
from flowstyle.model.style import Condition, Style

__all__ = [
    # registry entries
    "CLASS_NAMESPACE",
    "StyleProperty",
    "PseudoClass",
    "Registry",
    # declarations
    "Condition",
    "Style",
    # resolution
    "BASE_CLASS",
    "ElementShape",
    "ResolvedStyle",
    # diagnostic
    "Severity",
    "Diagnostic",
]
