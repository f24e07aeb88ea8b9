"""flowstyle: composable CSS classes from typed style declarations."""
from __future__ import annotations

__version__ = "0.1.0"

from flowstyle.config import DEFAULT_CONFIG, StylesheetConfig  # noqa: E402
from flowstyle.elements import Element, block, flex, render_page  # noqa: E402
from flowstyle.errors import (  # noqa: E402
    FlowStyleError,
    UnknownPropertyError,
    UnknownPseudoClassError,
)
from flowstyle.model import (  # noqa: E402
    BASE_CLASS,
    Condition,
    ElementShape,
    PseudoClass,
    Registry,
    ResolvedStyle,
    Style,
    StyleProperty,
)
from flowstyle.registry import (  # noqa: E402
    DEFAULT_REGISTRY,
    all_properties,
    all_pseudo_classes,
)
from flowstyle.resolver import resolve_styles  # noqa: E402
from flowstyle.stylesheet import generate_stylesheet, stylesheet  # noqa: E402

__all__ = [
    "__version__",
    # config
    "StylesheetConfig",
    "DEFAULT_CONFIG",
    # errors
    "FlowStyleError",
    "UnknownPropertyError",
    "UnknownPseudoClassError",
    # model
    "BASE_CLASS",
    "Condition",
    "ElementShape",
    "PseudoClass",
    "Registry",
    "ResolvedStyle",
    "Style",
    "StyleProperty",
    # registries
    "DEFAULT_REGISTRY",
    "all_properties",
    "all_pseudo_classes",
    # core operations
    "generate_stylesheet",
    "stylesheet",
    "resolve_styles",
    # markup
    "Element",
    "block",
    "flex",
    "render_page",
]
