"""Style property descriptor: one entry of the property registry."""

from __future__ import annotations

from dataclasses import dataclass

# Namespace for every class name flowstyle attaches to elements.
CLASS_NAMESPACE = "fs"


@dataclass(frozen=True)
class StyleProperty:
    """A styleable CSS property.

    Attributes:
        name: Canonical CSS property name, e.g. ``margin``.
        variable_name: Bare custom-property identifier (no leading ``--``).
        default_value: CSS value used when an element never sets the property.
    """

    name: str
    variable_name: str
    default_value: str

    def __post_init__(self) -> None:
        if not self.name or not self.variable_name:
            raise ValueError("StyleProperty name and variable_name must be non-empty")

    def prefixed_variable(self, prefix: str | None = None) -> str:
        """Return the custom property carrying this property's value.

        ``--margin`` without a prefix, ``--h-margin`` for prefix ``h``.
        """
        if not prefix:
            return f"--{self.variable_name}"
        return f"--{prefix}-{self.variable_name}"

    def class_name(self, prefix: str | None = None) -> str:
        """Return the class that binds this property, optionally per pseudo-class."""
        if not prefix:
            return f"{CLASS_NAMESPACE}-{self.variable_name}"
        return f"{CLASS_NAMESPACE}-{prefix}-{self.variable_name}"
