"""Tests for static stylesheet generation."""

import re

import pytest

from flowstyle.config import StylesheetConfig
from flowstyle.model import PseudoClass, Registry, StyleProperty
from flowstyle.registry import DEFAULT_REGISTRY, PROPERTIES, PSEUDO_CLASSES
from flowstyle.stylesheet import generate_stylesheet, stylesheet
from flowstyle.stylesheet.generator import CACHE_SIZE, _cached


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _toy_registry() -> Registry:
    return Registry(
        properties=(
            StyleProperty(name="margin", variable_name="margin", default_value="0"),
            StyleProperty(name="color", variable_name="color", default_value="black"),
        ),
        pseudo_classes=(PseudoClass(name="hover", prefix="h"),),
    )


TOY_CSS = (
    ".fs {\n"
    "  box-sizing: border-box;\n"
    "  --margin:initial;\n"
    "  --color:initial;\n"
    "  margin:var(--margin, 0);\n"
    "  color:var(--color, black);\n"
    "}\n"
    ".fs-as-flex { display: flex; }\n"
    ".fs-as-block { display: block; }\n"
    ".fs-margin { margin:var(--margin, 0); }\n"
    ".fs-color { color:var(--color, black); }\n"
    "\n"
    ".fs-h-margin:hover { margin:var(--h-margin, var(--margin, 0)); }\n"
    ".fs-h-color:hover { color:var(--h-color, var(--color, black)); }\n"
)


# ---------------------------------------------------------------------------
# Exact output
# ---------------------------------------------------------------------------


class TestToyRegistry:
    def test_exact_text(self):
        assert generate_stylesheet(_toy_registry()) == TOY_CSS

    def test_no_prelude(self):
        css = generate_stylesheet(_toy_registry(), StylesheetConfig(prelude=""))
        assert "box-sizing" not in css
        assert css.startswith(".fs {\n  --margin:initial;\n")

    def test_custom_indent(self):
        css = generate_stylesheet(_toy_registry(), StylesheetConfig(indent="\t"))
        assert "\t--color:initial;" in css

    def test_no_pseudo_classes(self):
        registry = Registry(properties=_toy_registry().properties)
        css = generate_stylesheet(registry)
        assert ":hover" not in css
        assert css.endswith(".fs-color { color:var(--color, black); }\n")


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------


class TestDeterminism:
    def test_same_registry_same_text(self):
        assert generate_stylesheet() == generate_stylesheet()

    def test_equal_registries_same_text(self):
        copy = Registry(properties=tuple(PROPERTIES), pseudo_classes=tuple(PSEUDO_CLASSES))
        assert generate_stylesheet(copy) == generate_stylesheet(DEFAULT_REGISTRY)

    def test_cached_stylesheet_is_shared(self):
        assert stylesheet() is stylesheet()
        assert stylesheet() == generate_stylesheet()

    def test_cache_is_bounded(self):
        toy = _toy_registry()
        for width in range(1, CACHE_SIZE * 3):
            css = stylesheet(toy, StylesheetConfig(indent=" " * width))
            assert css == generate_stylesheet(toy, StylesheetConfig(indent=" " * width))
        assert _cached.cache_info().currsize <= CACHE_SIZE

    def test_registry_order_drives_output(self):
        toy = _toy_registry()
        flipped = Registry(
            properties=tuple(reversed(toy.properties)),
            pseudo_classes=toy.pseudo_classes,
        )
        assert generate_stylesheet(flipped) != generate_stylesheet(toy)


# ---------------------------------------------------------------------------
# Coverage of the default registry
# ---------------------------------------------------------------------------


class TestCoverage:
    @pytest.fixture(scope="class")
    def css(self) -> str:
        return generate_stylesheet()

    def test_every_variable_reset_once(self, css):
        for prop in PROPERTIES:
            assert css.count(f"  {prop.prefixed_variable()}:initial;") == 1

    def test_every_property_bound_in_base_class(self, css):
        base = css.split("}", 1)[0]
        for prop in PROPERTIES:
            binding = f"  {prop.name}:var({prop.prefixed_variable()}, {prop.default_value});"
            assert binding in base

    def test_one_property_class_each(self, css):
        for prop in PROPERTIES:
            pattern = rf"^\.{re.escape(prop.class_name())} \{{"
            assert len(re.findall(pattern, css, re.MULTILINE)) == 1

    def test_one_override_rule_per_pair(self, css):
        for pseudo in PSEUDO_CLASSES:
            for prop in PROPERTIES:
                selector = f".{prop.class_name(pseudo.prefix)}:{pseudo.name} "
                assert css.count(selector) == 1

    def test_override_falls_back_to_base_variable(self, css):
        assert (
            ".fs-f-outline:focus { outline:var(--f-outline, var(--outline, none)); }"
            in css
        )

    def test_shape_markers_precede_property_classes(self, css):
        assert css.index(".fs-as-block {") < css.index(".fs-display {")
        assert css.index(".fs-as-flex {") < css.index(".fs-display {")

    def test_shape_markers_only_set_display(self, css):
        assert ".fs-as-flex { display: flex; }" in css
        assert ".fs-as-block { display: block; }" in css
