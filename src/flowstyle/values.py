"""Value domains for the authoring API.

Every helper returns a plain CSS string. Keyword domains are ``StrEnum`` so
members can be passed anywhere a string value is accepted.
"""
from __future__ import annotations

from enum import StrEnum

Length = int | float | str


def number(value: int | float) -> str:
    """Format a number without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Lengths
# ---------------------------------------------------------------------------

AUTO = "auto"


def length(value: Length) -> str:
    """Coerce a length: integers become pixels, strings pass through."""
    if isinstance(value, bool):
        raise TypeError("bool is not a valid CSS length")
    if isinstance(value, int):
        return px(value)
    if isinstance(value, float):
        return f"{number(value)}px"
    return str(value)


def px(value: int | float) -> str:
    return f"{number(value)}px"


def em(value: int | float) -> str:
    return f"{number(value)}em"


def rem(value: int | float) -> str:
    return f"{number(value)}rem"


def percent(value: int | float) -> str:
    return f"{number(value)}%"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class Color(StrEnum):
    TRANSPARENT = "transparent"
    BLACK = "black"
    WHITE = "white"
    CURRENT = "currentColor"
    INHERIT = "inherit"


def hex_color(value: str) -> str:
    """``hex_color("ff8800")`` -> ``#ff8800``; a leading ``#`` is tolerated."""
    return f"#{value.lstrip('#')}"


def rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def rgba(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r}, {g}, {b}, {number(a)})"


# ---------------------------------------------------------------------------
# Keyword domains
# ---------------------------------------------------------------------------


class TextAlign(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"
    START = "start"
    END = "end"


class Position(StrEnum):
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"


class JustifyContent(StrEnum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(StrEnum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    START = "start"
    END = "end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


class AlignContent(StrEnum):
    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"
    STRETCH = "stretch"


class FlexDirection(StrEnum):
    ROW = "row"
    ROW_REVERSE = "row-reverse"
    COLUMN = "column"
    COLUMN_REVERSE = "column-reverse"


class FlexWrap(StrEnum):
    NOWRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class Display(StrEnum):
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    GRID = "grid"
    NONE = "none"


class Overflow(StrEnum):
    VISIBLE = "visible"
    HIDDEN = "hidden"
    CLIP = "clip"
    SCROLL = "scroll"
    AUTO = "auto"


class FontWeight(StrEnum):
    THIN = "100"
    EXTRA_LIGHT = "200"
    LIGHT = "300"
    NORMAL = "400"
    MEDIUM = "500"
    SEMI_BOLD = "600"
    BOLD = "700"
    EXTRA_BOLD = "800"
    BLACK = "900"
    EXTRA_BLACK = "950"


class FontFamily(StrEnum):
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    SYSTEM_UI = "system-ui"
    UI_SANS_SERIF = "ui-sans-serif"
    UI_SERIF = "ui-serif"
    UI_MONOSPACE = "ui-monospace"
    UI_ROUNDED = "ui-rounded"


class TransformOrigin(StrEnum):
    CENTER = "center"
    TOP_LEFT = "top left"
    TOP_RIGHT = "top right"
    BOTTOM_LEFT = "bottom left"
    BOTTOM_RIGHT = "bottom right"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Cursor(StrEnum):
    """Common cursors; any other CSS cursor keyword may be passed as a string."""

    DEFAULT = "default"
    POINTER = "pointer"
    TEXT = "text"
    MOVE = "move"
    GRAB = "grab"
    GRABBING = "grabbing"
    NOT_ALLOWED = "not-allowed"
    WAIT = "wait"
    PROGRESS = "progress"


# ---------------------------------------------------------------------------
# Composite values
# ---------------------------------------------------------------------------


def flex_flow(
    direction: FlexDirection | str = FlexDirection.ROW,
    wrap: FlexWrap | str | None = None,
) -> str:
    """Build a ``flex-flow`` shorthand; the wrap part is omitted when None."""
    if wrap is None:
        return str(direction)
    return f"{direction} {wrap}"


def flex_grow(grow: int = 1, shrink: int = 1, basis: Length = AUTO) -> str:
    """Build a ``flex`` shorthand (grow, shrink, basis)."""
    return f"{grow} {shrink} {length(basis)}"


def translate(x: Length, y: Length) -> str:
    return f"translate({length(x)},{length(y)})"


def rotate(degrees: int | float) -> str:
    return f"rotate({number(degrees)}deg)"


def scale(x: int | float, y: int | float | None = None) -> str:
    if y is None:
        y = x
    return f"scale({number(x)},{number(y)})"


def shadow(
    x: Length = 0,
    y: Length = 0,
    blur: Length = 0,
    spread: Length = 0,
    color: str = "rgba(0, 0, 0, 0.1)",
    inset: bool = False,
) -> str:
    """Build one ``box-shadow`` layer."""
    parts = [length(x), length(y), length(blur), length(spread), str(color)]
    if inset:
        parts.insert(0, "inset")
    return " ".join(parts)
