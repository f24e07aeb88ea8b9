"""Pseudo-class descriptor: one entry of the pseudo-class registry."""

from __future__ import annotations

from dataclasses import dataclass

from flowstyle.model.property import CLASS_NAMESPACE


@dataclass(frozen=True)
class PseudoClass:
    """An interactive state under which alternate style values apply.

    ``name`` is the CSS keyword written after the colon in a selector;
    ``prefix`` namespaces the variables and classes for this state.
    """

    name: str
    prefix: str

    def __post_init__(self) -> None:
        if not self.name or not self.prefix:
            raise ValueError("PseudoClass name and prefix must be non-empty")

    @property
    def class_name(self) -> str:
        return f"{CLASS_NAMESPACE}-{self.prefix}"

    @property
    def selector(self) -> str:
        return f":{self.name}"
