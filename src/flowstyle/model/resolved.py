"""Resolved per-element output: class names and inline variables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ResolvedStyle:
    """Class names and custom-property assignments for one element.

    ``variables`` is stored as a read-only view of a private copy, in
    assignment order.
    """

    classes: tuple[str, ...]
    variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def __hash__(self) -> int:
        return hash((self.classes, tuple(self.variables.items())))

    @property
    def class_attribute(self) -> str:
        return " ".join(self.classes)

    @property
    def style_attribute(self) -> str:
        return "".join(f"{name}:{value};" for name, value in self.variables.items())

    def has_class(self, name: str) -> bool:
        return name in self.classes
