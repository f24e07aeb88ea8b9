"""A thin markup element that carries style declarations.

This is the minimal tree node needed to attach resolved classes and inline
variables to HTML; it is not a general templating layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from markupsafe import Markup, escape

from flowstyle.model.markers import ElementShape
from flowstyle.model.resolved import ResolvedStyle
from flowstyle.model.style import Condition, Style
from flowstyle.resolver import resolve_styles
from flowstyle.stylesheet import stylesheet

VOID_TAGS = frozenset({"br", "hr", "img", "input", "link", "meta"})


class Element:
    """An HTML element with an ordered list of style declarations."""

    def __init__(
        self,
        tag: str,
        *children: Element | str,
        shape: ElementShape | None = None,
        attrs: Mapping[str, str] | None = None,
    ) -> None:
        if not tag:
            raise ValueError("Element tag must be a non-empty string")
        if tag in VOID_TAGS and children:
            raise ValueError(f"<{tag}> cannot have children")
        self.tag = tag
        self.children: list[Element | str] = list(children)
        self.shape = shape
        self.attrs: dict[str, str] = dict(attrs or {})
        self._styles: list[Style] = []

    @property
    def styles(self) -> tuple[Style, ...]:
        return tuple(self._styles)

    def style(
        self,
        *styles: Style | Iterable[Style],
        when: Condition | None = None,
    ) -> Element:
        """Append declarations in call order; with *when*, mark them conditional."""
        for item in styles:
            batch = [item] if isinstance(item, Style) else list(item)
            for style in batch:
                self._styles.append(style.with_condition(when) if when else style)
        return self

    def resolve(self) -> ResolvedStyle | None:
        """Resolve this element's styles, or None for an unstyled plain element."""
        if not self._styles and self.shape is None:
            return None
        return resolve_styles(self._styles, shape=self.shape or ElementShape.BLOCK)

    def _attributes(self) -> str:
        attrs = dict(self.attrs)
        resolved = self.resolve()
        if resolved is not None:
            extra_class = attrs.pop("class", "")
            attrs["class"] = " ".join(filter(None, (resolved.class_attribute, extra_class)))
            if resolved.variables:
                extra_style = attrs.pop("style", "")
                attrs["style"] = resolved.style_attribute + extra_style
        return "".join(f' {name}="{escape(value)}"' for name, value in attrs.items())

    def render(self) -> Markup:
        open_tag = f"<{self.tag}{self._attributes()}>"
        if self.tag in VOID_TAGS:
            return Markup(open_tag)
        inner = "".join(
            child.render() if isinstance(child, Element) else escape(child)
            for child in self.children
        )
        return Markup(f"{open_tag}{inner}</{self.tag}>")

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, styles={len(self._styles)}, children={len(self.children)})"


def _html_attrs(attrs: Mapping[str, str]) -> dict[str, str]:
    # class_ -> class, data_id -> data-id
    return {name.rstrip("_").replace("_", "-"): value for name, value in attrs.items()}


def block(*children: Element | str, tag: str = "div", **attrs: str) -> Element:
    """A block container."""
    return Element(tag, *children, shape=ElementShape.BLOCK, attrs=_html_attrs(attrs))


def flex(*children: Element | str, tag: str = "div", **attrs: str) -> Element:
    """A flex container."""
    return Element(tag, *children, shape=ElementShape.FLEX, attrs=_html_attrs(attrs))


def render_page(*body: Element | str, title: str = "", lang: str = "en") -> Markup:
    """Render a full HTML document with the stylesheet embedded once."""
    content = "".join(
        child.render() if isinstance(child, Element) else escape(child) for child in body
    )
    return Markup(
        "<!DOCTYPE html>"
        f'<html lang="{escape(lang)}"><head><meta charset="utf-8">'
        f"<title>{escape(title)}</title>"
        f"<style>{stylesheet()}</style>"
        f"</head><body>{content}</body></html>"
    )
