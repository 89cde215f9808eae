"""Static markup fragments embedded in the theme configuration.

The logo, the ``<head>`` metadata, and an optional custom search box are plain
markup trees rather than template strings. A fragment is one of three frozen
node types:

- :class:`Text` holds character data and is always escaped when rendered.
- :class:`Element` is a single tag with attributes and child nodes.
- :class:`Fragment` groups nodes without emitting a wrapper element.

Rendering produces :class:`markupsafe.Markup`, so the result can be dropped
into a Jinja template with autoescape enabled without being escaped twice.

Examples
--------
>>> from keras_docs_theme.fragments import Fragment, meta, render_fragment
>>> str(render_fragment(Fragment((meta(name="robots", content="index"),))))
'<meta name="robots" content="index">'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta",
     "source", "track", "wbr"}
)


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Character data inside a fragment."""

    value: str


@dc.dataclass(frozen=True, slots=True)
class Element:
    """A single markup element with ordered attributes and children."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Reject children on void elements."""
        if self.tag in VOID_ELEMENTS and self.children:
            msg = f"<{self.tag}> is a void element and cannot have children."
            raise ValueError(msg)


@dc.dataclass(frozen=True, slots=True)
class Fragment:
    """An ordered group of nodes rendered without a wrapper element."""

    children: tuple[Node, ...] = ()


Node: typ.TypeAlias = Text | Element | Fragment


def render_fragment(node: Node) -> Markup:
    """Render a fragment tree into escaped HTML.

    Parameters
    ----------
    node : Node
        Root of the tree to render.

    Returns
    -------
    Markup
        HTML safe to interpolate into an autoescaping template.
    """
    match node:
        case Text(value=value):
            return escape(value)
        case Element(tag=tag, attrs=attrs, children=children):
            rendered_attrs = "".join(
                f' {name}="{escape(value)}"' for name, value in attrs
            )
            if tag in VOID_ELEMENTS:
                return Markup(f"<{tag}{rendered_attrs}>")
            inner = "".join(render_fragment(child) for child in children)
            return Markup(f"<{tag}{rendered_attrs}>{inner}</{tag}>")
        case Fragment(children=children):
            return Markup("\n".join(render_fragment(child) for child in children))
        case _:  # pragma: no cover - guarded by the type alias
            msg = f"Unsupported fragment node: {node!r}"
            raise TypeError(msg)


def text_content(node: Node) -> str:
    """Return the concatenated character data of a fragment tree."""
    match node:
        case Text(value=value):
            return value
        case Element(children=children) | Fragment(children=children):
            return "".join(text_content(child) for child in children)
        case _:  # pragma: no cover - guarded by the type alias
            msg = f"Unsupported fragment node: {node!r}"
            raise TypeError(msg)


def iter_elements(node: Node) -> typ.Iterator[Element]:
    """Yield every element in the tree in document order."""
    match node:
        case Element(children=children):
            yield node
            for child in children:
                yield from iter_elements(child)
        case Fragment(children=children):
            for child in children:
                yield from iter_elements(child)
        case _:
            return


def meta(**attrs: str) -> Element:
    """Build a ``<meta>`` element from keyword attributes.

    ``http_equiv`` style keywords are converted to ``http-equiv``.
    """
    return Element(
        "meta", tuple((name.replace("_", "-"), value) for name, value in attrs.items())
    )


def span(text: str, *, classes: str | None = None) -> Element:
    """Build a ``<span>`` with optional CSS classes wrapping ``text``."""
    attrs = (("class", classes),) if classes else ()
    return Element("span", attrs, (Text(text),))


__all__ = [
    "VOID_ELEMENTS",
    "Element",
    "Fragment",
    "Node",
    "Text",
    "iter_elements",
    "meta",
    "render_fragment",
    "span",
    "text_content",
]
