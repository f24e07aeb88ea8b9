"""Stylesheet generation settings."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StylesheetConfig:
    """Formatting options for the generated stylesheet.

    The class and variable names are fixed by the registry; only the text
    layout and the base-class prelude are configurable.
    """

    prelude: str = "box-sizing: border-box;"
    indent: str = "  "


DEFAULT_CONFIG = StylesheetConfig()
