"""Per-element style resolution: declarations -> classes + inline variables."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flowstyle.errors import UnknownPropertyError, UnknownPseudoClassError
from flowstyle.model.catalog import Registry
from flowstyle.model.markers import BASE_CLASS, ElementShape
from flowstyle.model.resolved import ResolvedStyle
from flowstyle.model.style import Style
from flowstyle.registry import DEFAULT_REGISTRY

logger = logging.getLogger(__name__)


def _flatten(styles: Iterable[Style | Iterable[Style]]) -> Iterable[Style]:
    for item in styles:
        if isinstance(item, Style):
            yield item
        else:
            yield from _flatten(item)


def _check_registered(style: Style, registry: Registry) -> None:
    if not registry.has_property(style.property):
        raise UnknownPropertyError(style.property.name)
    if style.condition is not None and not registry.has_pseudo_class(
        style.condition.pseudo_class
    ):
        raise UnknownPseudoClassError(style.condition.pseudo_class.name)


def resolve_styles(
    styles: Iterable[Style | Iterable[Style]],
    shape: ElementShape = ElementShape.BLOCK,
    registry: Registry = DEFAULT_REGISTRY,
) -> ResolvedStyle:
    """Resolve one element's ordered declarations.

    Later declarations replace earlier ones with the same property and
    condition; the replaced entry keeps its original position so output order
    only depends on the input. Unconditional and conditional declarations of
    the same property are independent and both appear in the output.
    """
    latest: dict[tuple[str, str | None], Style] = {}
    for style in _flatten(styles):
        _check_registered(style, registry)
        latest[style.key] = style

    classes = [BASE_CLASS, shape.class_name]
    variables: dict[str, str] = {}
    for style in latest.values():
        prefix = style.condition.prefix if style.condition else None
        classes.append(style.property.class_name(prefix))
        variables[style.property.prefixed_variable(prefix)] = style.value

    logger.debug(
        "Resolved %d declaration(s) into %d class(es)", len(latest), len(classes)
    )
    return ResolvedStyle(classes=tuple(classes), variables=variables)
