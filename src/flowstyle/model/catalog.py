"""Registry model: the closed sets of properties and pseudo-classes."""

from __future__ import annotations

from dataclasses import dataclass

from flowstyle.errors import UnknownPropertyError, UnknownPseudoClassError
from flowstyle.model.property import StyleProperty
from flowstyle.model.pseudo_class import PseudoClass


@dataclass(frozen=True)
class Registry:
    """An ordered, immutable pairing of property and pseudo-class registries.

    Order is part of the contract: it fixes the byte-for-byte layout of the
    generated stylesheet.
    """

    properties: tuple[StyleProperty, ...]
    pseudo_classes: tuple[PseudoClass, ...] = ()

    def get_property(self, name: str) -> StyleProperty:
        for prop in self.properties:
            if prop.name == name:
                return prop
        raise UnknownPropertyError(name)

    def get_pseudo_class(self, name: str) -> PseudoClass:
        for pseudo in self.pseudo_classes:
            if pseudo.name == name:
                return pseudo
        raise UnknownPseudoClassError(name)

    def has_property(self, prop: StyleProperty) -> bool:
        return prop in self.properties

    def has_pseudo_class(self, pseudo: PseudoClass) -> bool:
        return pseudo in self.pseudo_classes
