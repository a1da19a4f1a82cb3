"""Small typed node tree used to assemble HTML documents.

User supplied text can only enter a tree through :class:`Text`, which escapes
its value when it is constructed. Line breaks are separate nodes, so escaping
never touches the ``<br>`` marker.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence, Union

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_TRANSLATION = str.maketrans(_ESCAPES)

VOID_ELEMENTS = frozenset({"br", "meta", "hr", "img", "link"})

_INDENT = "  "


def escape_html(value: object) -> str:
    """Escape ``& < > " '`` in ``value``; ``None`` and blanks become ``""``."""

    if value is None:
        return ""
    text = str(value)
    if not text:
        return ""
    return text.translate(_TRANSLATION)


class Text:
    """Escaped text node."""

    __slots__ = ("markup",)

    def __init__(self, value: object) -> None:
        self.markup = escape_html(value)

    def __repr__(self) -> str:
        return f"Text({self.markup!r})"


class LineBreak:
    __slots__ = ()
    markup = "<br>"


class StyleSheet:
    """Trusted CSS owned by the package, emitted inside ``<style>``."""

    __slots__ = ("css",)

    def __init__(self, css: str) -> None:
        if "</" in css:
            raise ValueError("Stylesheet must not contain closing tags")
        self.css = css


Node = Union["Element", Text, LineBreak, StyleSheet]
Child = Union[Node, str, None]


@dataclass
class Element:
    """HTML element with attributes and child nodes.

    Plain ``str`` children are converted to :class:`Text` and ``None`` children
    are dropped, which keeps optional blocks terse at the call site.
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def append(self, *children: Child) -> "Element":
        for child in children:
            if child is None:
                continue
            if isinstance(child, str):
                child = Text(child)
            self.children.append(child)
        return self

    def extend(self, children: Iterable[Child]) -> "Element":
        return self.append(*children)


def el(tag: str, *children: Child, cls: str | None = None, **attrs: str) -> Element:
    """Shorthand to build an :class:`Element`.

    ``cls`` maps to the ``class`` attribute; other keyword names have
    underscores turned into dashes (``http_equiv`` -> ``http-equiv``).
    """

    attributes: dict[str, str] = {}
    if cls:
        attributes["class"] = cls
    for name, value in attrs.items():
        attributes[name.replace("_", "-")] = value
    return Element(tag, attributes).append(*children)


def multiline_text(value: str | None) -> list[Node]:
    """Escape each line of ``value`` and join the lines with :class:`LineBreak`.

    Unix, Windows and classic Mac line endings all start a new line.
    """

    if not value:
        return []
    nodes: list[Node] = []
    for index, line in enumerate(value.splitlines()):
        if index:
            nodes.append(LineBreak())
        nodes.append(Text(line))
    return nodes


@dataclass
class Document:
    """Root of an HTML5 document."""

    head: Element
    body: Element
    lang: str = "en"

    def render(self) -> str:
        """Serialise the tree. Equal trees always give identical output."""

        root = Element("html", {"lang": self.lang}, [self.head, self.body])
        lines = ["<!DOCTYPE html>"]
        _render_element(root, 0, lines)
        return "\n".join(lines) + "\n"


def _render_attrs(attrs: Mapping[str, str]) -> str:
    return "".join(f' {name}="{escape_html(value)}"' for name, value in attrs.items())


def _is_inline(children: Sequence[Node]) -> bool:
    return all(isinstance(child, (Text, LineBreak)) for child in children)


def _render_element(element: Element, depth: int, lines: list[str]) -> None:
    indent = _INDENT * depth
    opening = f"<{element.tag}{_render_attrs(element.attrs)}>"

    if element.tag in VOID_ELEMENTS:
        if element.children:
            raise ValueError(f"<{element.tag}> cannot have children")
        lines.append(indent + opening)
        return

    closing = f"</{element.tag}>"
    if _is_inline(element.children):
        inner = "".join(child.markup for child in element.children)  # type: ignore[union-attr]
        lines.append(f"{indent}{opening}{inner}{closing}")
        return

    lines.append(indent + opening)
    for child in element.children:
        if isinstance(child, Element):
            _render_element(child, depth + 1, lines)
        elif isinstance(child, StyleSheet):
            for css_line in child.css.strip("\n").splitlines():
                lines.append(f"{indent}{_INDENT}{css_line}" if css_line else "")
        else:
            lines.append(f"{indent}{_INDENT}{child.markup}")
    lines.append(indent + closing)


__all__ = [
    "escape_html",
    "Text",
    "LineBreak",
    "StyleSheet",
    "Element",
    "Document",
    "el",
    "multiline_text",
]
