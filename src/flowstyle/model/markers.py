"""Marker classes attached to every styled element."""

from __future__ import annotations

from enum import Enum

from flowstyle.model.property import CLASS_NAMESPACE

# Establishes the variable defaults; present on every styled element.
BASE_CLASS = CLASS_NAMESPACE


class ElementShape(Enum):
    """Display shape of a styled element, chosen by the markup builder."""

    BLOCK = "block"
    FLEX = "flex"

    @property
    def class_name(self) -> str:
        return f"{CLASS_NAMESPACE}-as-{self.value}"

    @property
    def display(self) -> str:
        return self.value
