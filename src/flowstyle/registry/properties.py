"""The property registry: every CSS property flowstyle can set.

Entries are listed in stylesheet order. Inherited CSS properties default to
``inherit`` so an element that never sets them keeps normal inheritance;
the rest default to their CSS initial value (or a reset-friendly value
such as ``0`` for box spacing).
"""

from __future__ import annotations

from flowstyle.model.property import StyleProperty


def _prop(name: str, default: str) -> StyleProperty:
    return StyleProperty(name=name, variable_name=name, default_value=default)


# Box model
MARGIN = _prop("margin", "0")
PADDING = _prop("padding", "0")
BACKGROUND = _prop("background", "transparent")

# Border
BORDER_COLOR = _prop("border-color", "currentColor")
BORDER_RADIUS = _prop("border-radius", "0")
BORDER_STYLE = _prop("border-style", "solid")
BORDER_WIDTH = _prop("border-width", "0")
OUTLINE = _prop("outline", "none")
BOX_SHADOW = _prop("box-shadow", "none")

# Sizing
HEIGHT = _prop("height", "auto")
WIDTH = _prop("width", "auto")
MIN_HEIGHT = _prop("min-height", "auto")
MIN_WIDTH = _prop("min-width", "auto")
MAX_HEIGHT = _prop("max-height", "none")
MAX_WIDTH = _prop("max-width", "none")

# Layout
DISPLAY = _prop("display", "block")
FLEX_FLOW = _prop("flex-flow", "row nowrap")
JUSTIFY_CONTENT = _prop("justify-content", "normal")
ALIGN_ITEMS = _prop("align-items", "normal")
ALIGN_CONTENT = _prop("align-content", "normal")
GAP = _prop("gap", "normal")
FLEX = _prop("flex", "0 1 auto")
OVERFLOW = _prop("overflow", "visible")

# Positioning
POSITION = _prop("position", "static")
INSET = _prop("inset", "auto")
Z_INDEX = _prop("z-index", "auto")

# Typography
COLOR = _prop("color", "inherit")
TEXT_ALIGN = _prop("text-align", "inherit")
FONT_WEIGHT = _prop("font-weight", "inherit")
FONT_SIZE = _prop("font-size", "inherit")
FONT_FAMILY = _prop("font-family", "inherit")
LINE_HEIGHT = _prop("line-height", "inherit")
LETTER_SPACING = _prop("letter-spacing", "inherit")
TEXT_TRANSFORM = _prop("text-transform", "inherit")
TEXT_DECORATION = _prop("text-decoration", "none")
WHITE_SPACE = _prop("white-space", "inherit")
TEXT_OVERFLOW = _prop("text-overflow", "clip")
TEXT_SHADOW = _prop("text-shadow", "inherit")

# Effects
OPACITY = _prop("opacity", "1")
TRANSFORM = _prop("transform", "none")
TRANSFORM_ORIGIN = _prop("transform-origin", "center")
TRANSITION = _prop("transition", "none")

# Interactivity
CURSOR = _prop("cursor", "inherit")


PROPERTIES: tuple[StyleProperty, ...] = (
    MARGIN,
    PADDING,
    BACKGROUND,
    BORDER_COLOR,
    BORDER_RADIUS,
    BORDER_STYLE,
    BORDER_WIDTH,
    OUTLINE,
    BOX_SHADOW,
    HEIGHT,
    WIDTH,
    MIN_HEIGHT,
    MIN_WIDTH,
    MAX_HEIGHT,
    MAX_WIDTH,
    DISPLAY,
    FLEX_FLOW,
    JUSTIFY_CONTENT,
    ALIGN_ITEMS,
    ALIGN_CONTENT,
    GAP,
    FLEX,
    OVERFLOW,
    POSITION,
    INSET,
    Z_INDEX,
    COLOR,
    TEXT_ALIGN,
    FONT_WEIGHT,
    FONT_SIZE,
    FONT_FAMILY,
    LINE_HEIGHT,
    LETTER_SPACING,
    TEXT_TRANSFORM,
    TEXT_DECORATION,
    WHITE_SPACE,
    TEXT_OVERFLOW,
    TEXT_SHADOW,
    OPACITY,
    TRANSFORM,
    TRANSFORM_ORIGIN,
    TRANSITION,
    CURSOR,
)
