"""Authoring API: one factory per property, plus ``when`` for conditions.

Usage::

    from flowstyle import styles as s

    button.style(s.padding(y=4, x=8), s.border_radius(4))
    button.style(*s.when(s.HOVER, s.color("pink"), s.background("#eee")))
"""
from __future__ import annotations

from collections.abc import Iterable

from flowstyle.model.style import Condition, Style
from flowstyle.registry import properties as p
from flowstyle.registry import pseudo_classes
from flowstyle.values import (
    AUTO,
    AlignContent,
    AlignItems,
    Cursor,
    Display,
    FontFamily,
    FontWeight,
    JustifyContent,
    Length,
    Overflow,
    Position,
    TextAlign,
    TransformOrigin,
    length,
    number,
)

HOVER = Condition(pseudo_classes.HOVER)
ACTIVE = Condition(pseudo_classes.ACTIVE)
FOCUS = Condition(pseudo_classes.FOCUS)
DISABLED = Condition(pseudo_classes.DISABLED)


def when(condition: Condition, *styles: Style | Iterable[Style]) -> tuple[Style, ...]:
    """Mark every style as applying only while ``condition`` holds."""
    if not styles:
        raise ValueError("when() requires at least one style")
    return tuple(style.with_condition(condition) for style in _flatten(styles))


def _flatten(styles: Iterable[Style | Iterable[Style]]) -> list[Style]:
    flat: list[Style] = []
    for item in styles:
        if isinstance(item, Style):
            flat.append(item)
        else:
            flat.extend(_flatten(item))
    return flat


def _sides(
    name: str,
    value: Length | None,
    y: Length | None,
    x: Length | None,
    top: Length | None,
    right: Length | None,
    bottom: Length | None,
    left: Length | None,
    default: Length,
) -> str:
    """Build a one-, two- or four-value box shorthand."""
    axes = (y, x)
    sides = (top, right, bottom, left)
    forms = [
        value is not None,
        any(a is not None for a in axes),
        any(s is not None for s in sides),
    ]
    if sum(forms) > 1:
        raise ValueError(f"{name}: pass a single value, y/x axes, or sides, not a mix")
    if value is not None:
        return length(value)
    if forms[1]:
        return " ".join(length(default if a is None else a) for a in axes)
    if forms[2]:
        return " ".join(length(default if s is None else s) for s in sides)
    raise ValueError(f"{name}: no value given")


# ---------------------------------------------------------------------------
# Box model
# ---------------------------------------------------------------------------


def margin(
    value: Length | None = None,
    *,
    y: Length | None = None,
    x: Length | None = None,
    top: Length | None = None,
    right: Length | None = None,
    bottom: Length | None = None,
    left: Length | None = None,
) -> Style:
    """Set the margin on all sides, per axis, or per side."""
    return Style(p.MARGIN, _sides("margin", value, y, x, top, right, bottom, left, 0))


def padding(
    value: Length | None = None,
    *,
    y: Length | None = None,
    x: Length | None = None,
    top: Length | None = None,
    right: Length | None = None,
    bottom: Length | None = None,
    left: Length | None = None,
) -> Style:
    """Set the padding on all sides, per axis, or per side."""
    return Style(p.PADDING, _sides("padding", value, y, x, top, right, bottom, left, 0))


def background(value: str) -> Style:
    return Style(p.BACKGROUND, str(value))


# ---------------------------------------------------------------------------
# Border
# ---------------------------------------------------------------------------


def border_color(value: str) -> Style:
    return Style(p.BORDER_COLOR, str(value))


def border_radius(value: Length) -> Style:
    return Style(p.BORDER_RADIUS, length(value))


def border_style(value: str) -> Style:
    """Set the border style, e.g. ``solid``, ``dashed``, ``dotted``."""
    return Style(p.BORDER_STYLE, str(value))


def border_width(
    value: Length | None = None,
    *,
    y: Length | None = None,
    x: Length | None = None,
    top: Length | None = None,
    right: Length | None = None,
    bottom: Length | None = None,
    left: Length | None = None,
) -> Style:
    return Style(
        p.BORDER_WIDTH,
        _sides("border_width", value, y, x, top, right, bottom, left, 0),
    )


def outline(width: Length, color: str = "currentColor", style: str = "solid") -> Style:
    """Set the outline shorthand: width, style and color."""
    return Style(p.OUTLINE, f"{length(width)} {style} {color}")


def box_shadow(*shadows: str) -> Style:
    """Set one or more shadow layers (see :func:`flowstyle.values.shadow`)."""
    if not shadows:
        raise ValueError("box_shadow() requires at least one shadow")
    return Style(p.BOX_SHADOW, ", ".join(str(s) for s in shadows))


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


def height(value: Length) -> Style:
    return Style(p.HEIGHT, length(value))


def width(value: Length) -> Style:
    return Style(p.WIDTH, length(value))


def min_height(value: Length) -> Style:
    return Style(p.MIN_HEIGHT, length(value))


def min_width(value: Length) -> Style:
    return Style(p.MIN_WIDTH, length(value))


def max_height(value: Length) -> Style:
    return Style(p.MAX_HEIGHT, length(value))


def max_width(value: Length) -> Style:
    return Style(p.MAX_WIDTH, length(value))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def display(value: Display | str) -> Style:
    return Style(p.DISPLAY, str(value))


def flex_flow(value: str) -> Style:
    """Set direction and wrap; build the value with :func:`flowstyle.values.flex_flow`."""
    return Style(p.FLEX_FLOW, str(value))


def justify_content(value: JustifyContent | str) -> Style:
    return Style(p.JUSTIFY_CONTENT, str(value))


def align_items(value: AlignItems | str) -> Style:
    return Style(p.ALIGN_ITEMS, str(value))


def align_content(value: AlignContent | str) -> Style:
    return Style(p.ALIGN_CONTENT, str(value))


def gap(value: Length) -> Style:
    return Style(p.GAP, length(value))


def flex(value: str) -> Style:
    """Set grow/shrink/basis; build the value with :func:`flowstyle.values.flex_grow`."""
    return Style(p.FLEX, str(value))


def overflow(value: Overflow | str) -> Style:
    return Style(p.OVERFLOW, str(value))


# ---------------------------------------------------------------------------
# Positioning
# ---------------------------------------------------------------------------


def position(value: Position | str) -> Style:
    return Style(p.POSITION, str(value))


def inset(
    value: Length | None = None,
    *,
    y: Length | None = None,
    x: Length | None = None,
    top: Length | None = None,
    right: Length | None = None,
    bottom: Length | None = None,
    left: Length | None = None,
) -> Style:
    """Set the inset; sides left out default to ``auto``."""
    return Style(p.INSET, _sides("inset", value, y, x, top, right, bottom, left, AUTO))


def z_index(value: int) -> Style:
    return Style(p.Z_INDEX, str(int(value)))


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def color(value: str) -> Style:
    return Style(p.COLOR, str(value))


def text_align(value: TextAlign | str) -> Style:
    return Style(p.TEXT_ALIGN, str(value))


def font_weight(value: FontWeight | int | str) -> Style:
    return Style(p.FONT_WEIGHT, str(value))


def font_size(value: Length) -> Style:
    return Style(p.FONT_SIZE, length(value))


def font_family(value: FontFamily | str) -> Style:
    return Style(p.FONT_FAMILY, str(value))


def line_height(value: int | float | str) -> Style:
    """Set the line height; numbers stay unitless and scale with the font size."""
    if isinstance(value, bool):
        raise TypeError("bool is not a valid line height")
    if isinstance(value, (int, float)):
        return Style(p.LINE_HEIGHT, number(value))
    return Style(p.LINE_HEIGHT, str(value))


def letter_spacing(value: Length) -> Style:
    return Style(p.LETTER_SPACING, length(value))


def text_transform(value: str) -> Style:
    """Set the text transform, e.g. ``uppercase``, ``lowercase``, ``capitalize``."""
    return Style(p.TEXT_TRANSFORM, str(value))


def text_decoration(value: str) -> Style:
    return Style(p.TEXT_DECORATION, str(value))


def white_space(value: str) -> Style:
    return Style(p.WHITE_SPACE, str(value))


def text_overflow(value: str) -> Style:
    return Style(p.TEXT_OVERFLOW, str(value))


def text_shadow(value: str) -> Style:
    return Style(p.TEXT_SHADOW, str(value))


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


def opacity(value: float) -> Style:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"opacity must be between 0 and 1, got {value}")
    return Style(p.OPACITY, str(value))


def transform(value: str) -> Style:
    """Set a transform; see :func:`~flowstyle.values.translate`, ``rotate``, ``scale``."""
    return Style(p.TRANSFORM, str(value))


def transform_origin(value: TransformOrigin | str) -> Style:
    return Style(p.TRANSFORM_ORIGIN, str(value))


def transition(value: str) -> Style:
    return Style(p.TRANSITION, str(value))


# ---------------------------------------------------------------------------
# Interactivity
# ---------------------------------------------------------------------------


def cursor(value: Cursor | str) -> Style:
    return Style(p.CURSOR, str(value))
