"""Static stylesheet generation.

The stylesheet is a pure function of the registry: it never depends on the
elements being rendered, so it is generated once and cached for the life
of the process.

Layout of the generated text:

1. The base marker class resets every property variable to ``initial`` and
   binds each real property to ``var(--variable, default)``. Because the
   variables are reset on every styled element, a value set on a parent is
   never inherited through the variable by a styled child.
2. Shape marker classes that only set ``display``.
3. One class per property that rebinds it from its variable. These come
   after the shape markers so an explicit ``display`` declaration wins.
4. For each pseudo-class, one rule per property that rebinds the property to
   the prefixed variable while the pseudo-class matches, falling back to
   the base variable and then the registry default.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from flowstyle.config import DEFAULT_CONFIG, StylesheetConfig
from flowstyle.model.catalog import Registry
from flowstyle.model.markers import BASE_CLASS, ElementShape
from flowstyle.model.property import StyleProperty
from flowstyle.model.pseudo_class import PseudoClass
from flowstyle.registry import DEFAULT_REGISTRY

logger = logging.getLogger(__name__)

# Shape markers are emitted in this order.
_SHAPE_ORDER = (ElementShape.FLEX, ElementShape.BLOCK)


def _binding(prop: StyleProperty, prefix: str | None = None) -> str:
    """``var()`` expression for a property, with the fallback chain."""
    base = f"var({prop.prefixed_variable()}, {prop.default_value})"
    if not prefix:
        return base
    return f"var({prop.prefixed_variable(prefix)}, {base})"


def _base_class(registry: Registry, config: StylesheetConfig) -> list[str]:
    indent = config.indent
    lines = [f".{BASE_CLASS} {{"]
    if config.prelude:
        lines.append(f"{indent}{config.prelude}")
    for prop in registry.properties:
        lines.append(f"{indent}{prop.prefixed_variable()}:initial;")
    for prop in registry.properties:
        lines.append(f"{indent}{prop.name}:{_binding(prop)};")
    lines.append("}")
    return lines


def _shape_classes() -> list[str]:
    return [
        f".{shape.class_name} {{ display: {shape.display}; }}" for shape in _SHAPE_ORDER
    ]


def _property_classes(registry: Registry) -> list[str]:
    return [
        f".{prop.class_name()} {{ {prop.name}:{_binding(prop)}; }}"
        for prop in registry.properties
    ]


def _pseudo_class_rules(registry: Registry, pseudo: PseudoClass) -> list[str]:
    return [
        f".{prop.class_name(pseudo.prefix)}{pseudo.selector} "
        f"{{ {prop.name}:{_binding(prop, pseudo.prefix)}; }}"
        for prop in registry.properties
    ]


def generate_stylesheet(
    registry: Registry = DEFAULT_REGISTRY,
    config: StylesheetConfig = DEFAULT_CONFIG,
) -> str:
    """Generate the complete static stylesheet for *registry*.

    Identical inputs always produce byte-identical output.
    """
    lines: list[str] = []
    lines.extend(_base_class(registry, config))
    lines.extend(_shape_classes())
    lines.extend(_property_classes(registry))
    for pseudo in registry.pseudo_classes:
        lines.append("")
        lines.extend(_pseudo_class_rules(registry, pseudo))

    css = "\n".join(lines) + "\n"
    logger.debug(
        "Generated stylesheet: %d properties, %d pseudo-classes, %d bytes",
        len(registry.properties),
        len(registry.pseudo_classes),
        len(css),
    )
    return css


# Enough for the default registry plus a few custom ones.
CACHE_SIZE = 8


@lru_cache(maxsize=CACHE_SIZE)
def _cached(registry: Registry, config: StylesheetConfig) -> str:
    return generate_stylesheet(registry, config)


def stylesheet(
    registry: Registry = DEFAULT_REGISTRY,
    config: StylesheetConfig = DEFAULT_CONFIG,
) -> str:
    """Return the stylesheet for *registry* and *config*, generated on first use.

    The most recently used registry and config pairs are kept, up to
    ``CACHE_SIZE`` of them.
    """
    return _cached(registry, config)
