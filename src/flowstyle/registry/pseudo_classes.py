"""The pseudo-class registry: supported interactive states."""

from __future__ import annotations

from flowstyle.model.pseudo_class import PseudoClass

HOVER = PseudoClass(name="hover", prefix="h")
ACTIVE = PseudoClass(name="active", prefix="a")
FOCUS = PseudoClass(name="focus", prefix="f")
DISABLED = PseudoClass(name="disabled", prefix="d")

PSEUDO_CLASSES: tuple[PseudoClass, ...] = (HOVER, ACTIVE, FOCUS, DISABLED)
