"""Minimal in-memory element tree and the default locator.

Enough of a DOM to drive the engine without a browser: update routines
write markup into ``inner_html``, and child nodes locate their handles
inside it with CSS-style selectors::

    body = Element("body")
    body.inner_html = '<main id="app"><nav class="menu"></nav></main>'
    select(body, "#app .menu")  # -> <nav class="menu">

Supported selectors: ``tag``, ``#id``, ``.class``, compounds such as
``div#main.card``, ``*``, and descendant chains separated by whitespace.
"""

import html
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Any

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

_COMPOUND = re.compile(r"^(?P<tag>\*|[A-Za-z][\w-]*)?(?P<rest>(?:[#.][\w-]+)*)$")
_QUALIFIER = re.compile(r"([#.])([\w-]+)")


@dataclass(eq=False)
class Element:
    """An element with attributes, text and child elements.

    Text is stored as plain ``str`` items in ``children``. Elements
    compare by identity, which is what the engine needs to detect two
    nodes claiming the same handle.
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Element | str"] = field(default_factory=list)
    parent: "Element | None" = field(default=None, repr=False)

    @property
    def id(self) -> str | None:
        return self.attrs.get("id")

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self.attrs.get("class", "").split())

    def append(self, child: "Element | str") -> "Element | str":
        """Append *child* and return it for chaining."""
        if isinstance(child, Element):
            if child.parent is not None:
                child.parent.remove(child)
            child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "Element | str") -> None:
        for index, item in enumerate(self.children):
            if item is child:
                del self.children[index]
                break
        else:
            msg = f"{child!r} is not a child of <{self.tag}>"
            raise ValueError(msg)
        if isinstance(child, Element):
            child.parent = None

    def elements(self) -> list["Element"]:
        """Child elements, skipping text."""
        return [child for child in self.children if isinstance(child, Element)]

    def descendants(self) -> Iterator["Element"]:
        """Depth-first, document order, excluding self."""
        for child in self.elements():
            yield child
            yield from child.descendants()

    def contains(self, other: "Element") -> bool:
        """True when *other* sits somewhere below this element."""
        node = other.parent
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def query(self, selector: str) -> "Element | None":
        return select(self, selector)

    @property
    def text(self) -> str:
        return "".join(child if isinstance(child, str) else child.text for child in self.children)

    @property
    def inner_html(self) -> str:
        return "".join(
            html.escape(child, quote=False) if isinstance(child, str) else child.outer_html
            for child in self.children
        )

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        for child in self.elements():
            child.parent = None
        self.children = []
        parser = _FragmentParser(self)
        parser.feed(markup)
        parser.close()

    @property
    def outer_html(self) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value)}"' if value else f" {name}" for name, value in self.attrs.items()
        )
        if self.tag in VOID_ELEMENTS:
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{self.inner_html}</{self.tag}>"


class _FragmentParser(HTMLParser):
    """Builds ``Element`` children under a container from markup."""

    def __init__(self, container: Element) -> None:
        super().__init__(convert_charrefs=True)
        self._stack = [container]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._stack[-1].append(element)
        if tag not in VOID_ELEMENTS:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._stack[-1].append(Element(tag, {name: value or "" for name, value in attrs}))

    def handle_endtag(self, tag: str) -> None:
        # Close up to the nearest matching open tag; stray end tags are ignored
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._stack[-1].append(data)


def _parse_compound(part: str) -> tuple[str | None, str | None, frozenset[str]]:
    match = _COMPOUND.match(part)
    if match is None or not part:
        msg = f"Unsupported selector: {part!r}"
        raise ValueError(msg)
    tag = match.group("tag")
    element_id: str | None = None
    classes: set[str] = set()
    for kind, value in _QUALIFIER.findall(match.group("rest")):
        if kind == "#":
            element_id = value
        else:
            classes.add(value)
    return (None if tag == "*" else tag), element_id, frozenset(classes)


def _matches(element: Element, compound: tuple[str | None, str | None, frozenset[str]]) -> bool:
    tag, element_id, classes = compound
    if tag is not None and element.tag.lower() != tag.lower():
        return False
    if element_id is not None and element.id != element_id:
        return False
    return classes.issubset(element.classes)


def select(parent: Any, selector: Any) -> Element | None:
    """Locate the first element below *parent* matching *selector*.

    This is the engine's default locator. *selector* may also be an
    ``Element`` already inside *parent*, which is returned as is.
    Returns ``None`` when nothing matches or *parent* is not an element.
    Raises ``ValueError`` for selector syntax it does not understand.
    """
    if not isinstance(parent, Element):
        return None
    if isinstance(selector, Element):
        return selector if parent.contains(selector) else None
    if not isinstance(selector, str) or not selector.strip():
        return None

    chain = [_parse_compound(part) for part in selector.split()]
    for candidate in parent.descendants():
        if not _matches(candidate, chain[-1]):
            continue
        # Remaining compounds must match ancestors, right to left, below parent
        pending = len(chain) - 2
        node = candidate.parent
        while pending >= 0 and node is not None and node is not parent:
            if _matches(node, chain[pending]):
                pending -= 1
            node = node.parent
        if pending < 0:
            return candidate
    return None
