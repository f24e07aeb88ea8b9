"""Style declarations and the conditions that gate them."""

from __future__ import annotations

from dataclasses import dataclass, replace

from flowstyle.model.property import StyleProperty
from flowstyle.model.pseudo_class import PseudoClass

# Characters that end an inline declaration unless nested in () or quotes.
_DECLARATION_BREAKS = frozenset(";{}")


def _top_level_breaks(value: str) -> set[str]:
    """Characters from ``;{}`` that sit outside parentheses and strings.

    An unclosed parenthesis or string is reported as ``(`` or the quote.
    """
    found: set[str] = set()
    depth = 0
    quote: str | None = None
    escaped = False
    for char in value:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif depth == 0 and char in _DECLARATION_BREAKS:
            found.add(char)
    if quote:
        found.add(quote)
    if depth:
        found.add("(")
    return found


@dataclass(frozen=True)
class Condition:
    """Wraps a pseudo-class so several styles can share one condition."""

    pseudo_class: PseudoClass

    @property
    def prefix(self) -> str:
        return self.pseudo_class.prefix

    @property
    def class_name(self) -> str:
        return self.pseudo_class.class_name

    def __str__(self) -> str:
        return self.pseudo_class.name


@dataclass(frozen=True)
class Style:
    """Set ``property`` to ``value``, optionally only while ``condition`` holds."""

    property: StyleProperty
    value: str
    condition: Condition | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"Style value for {self.property.name!r} must be a string, "
                f"got {type(self.value).__name__}"
            )
        if not self.value.strip():
            raise ValueError(f"Style value for {self.property.name!r} must be non-empty")
        bad = _top_level_breaks(self.value)
        if bad:
            raise ValueError(
                f"Style value for {self.property.name!r} contains forbidden "
                f"character(s) {''.join(sorted(bad))!r}: {self.value!r}"
            )

    @property
    def key(self) -> tuple[str, str | None]:
        """Identity used for last-write-wins resolution."""
        prefix = self.condition.prefix if self.condition else None
        return (self.property.name, prefix)

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None

    def with_condition(self, condition: Condition | None) -> Style:
        return replace(self, condition=condition)
