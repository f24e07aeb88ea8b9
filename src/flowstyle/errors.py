"""Error hierarchy for flowstyle."""
from __future__ import annotations


class FlowStyleError(Exception):
    """Base error for all flowstyle errors."""


class UnknownPropertyError(FlowStyleError, KeyError):
    """Raised when a style refers to a property outside the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown style property: {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownPseudoClassError(FlowStyleError, KeyError):
    """Raised when a condition refers to a pseudo-class outside the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown pseudo-class: {name!r}")

    def __str__(self) -> str:
        return self.args[0]
