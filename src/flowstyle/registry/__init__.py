"""Built-in registries for properties and pseudo-classes."""
from __future__ import annotations

from flowstyle.model.catalog import Registry
from flowstyle.model.property import StyleProperty
from flowstyle.model.pseudo_class import PseudoClass
from flowstyle.registry.properties import PROPERTIES
from flowstyle.registry.pseudo_classes import PSEUDO_CLASSES

DEFAULT_REGISTRY = Registry(properties=PROPERTIES, pseudo_classes=PSEUDO_CLASSES)


def all_properties() -> tuple[StyleProperty, ...]:
    """Return every registered property in stylesheet order."""
    return PROPERTIES


def all_pseudo_classes() -> tuple[PseudoClass, ...]:
    """Return every registered pseudo-class in stylesheet order."""
    return PSEUDO_CLASSES


__all__ = [
    "DEFAULT_REGISTRY",
    "PROPERTIES",
    "PSEUDO_CLASSES",
    "all_properties",
    "all_pseudo_classes",
]
