"""Builder API for constructing document trees against a source text."""

from __future__ import annotations

from typing import Any, Self

from marklint.ast.nodes import SYNTHESIZED, Node, RealSpan
from marklint.location import Location

LineColumn = tuple[int, int]


class TreeBuilder:
    """Creates nodes whose spans are written as ``(line, column)`` pairs.

    Positions are resolved against the source text, so a tree built here
    lines up with what a parser would produce for the same text::

        b = TreeBuilder("# Foo\\n## Bar\\n")
        tree = b.root(
            b.node("heading", (1, 1), (1, 6), b.text("Foo", (1, 3), (1, 6)), depth=1),
            b.node("heading", (2, 1), (2, 7), b.text("Bar", (2, 4), (2, 7)), depth=2),
        )
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._location = Location(text)

    @property
    def location(self) -> Location:
        return self._location

    def span(self, start: LineColumn, end: LineColumn) -> RealSpan:
        return RealSpan(self._location.to_offset(*start), self._location.to_offset(*end))

    def node(
        self,
        type_: str,
        start: LineColumn,
        end: LineColumn,
        *children: Node,
        value: str | None = None,
        **data: Any,
    ) -> Node:
        return Node(
            type=type_,
            children=tuple(children),
            span=self.span(start, end),
            value=value,
            data=data,
        )

    def text(self, value: str, start: LineColumn, end: LineColumn) -> Node:
        return self.node("text", start, end, value=value)

    def generated(self, type_: str, *children: Node, value: str | None = None, **data: Any) -> Node:
        """A node without source position, as a parser emits for synthesized content."""
        return Node(type=type_, children=tuple(children), span=SYNTHESIZED, value=value, data=data)

    def root(self, *children: Node) -> Node:
        """A ``root`` node spanning the whole text."""
        return Node(type="root", children=tuple(children), span=RealSpan(0, len(self._text)))


class NodeBuilder:
    """Fluent builder for a single node when spans are known as offsets."""

    def __init__(self, type_: str) -> None:
        self._type = type_
        self._children: list[Node] = []
        self._span: RealSpan | None = None
        self._value: str | None = None
        self._data: dict[str, Any] = {}

    def at(self, start: int, end: int) -> Self:
        self._span = RealSpan(start, end)
        return self

    def child(self, *nodes: Node) -> Self:
        self._children.extend(nodes)
        return self

    def value(self, value: str) -> Self:
        self._value = value
        return self

    def with_data(self, /, **data: Any) -> Self:
        self._data.update(data)
        return self

    def build(self) -> Node:
        return Node(
            type=self._type,
            children=tuple(self._children),
            span=self._span if self._span is not None else SYNTHESIZED,
            value=self._value,
            data=dict(self._data),
        )
