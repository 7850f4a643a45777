"""Loads serialized document trees (mdast-style JSON or YAML) into nodes."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from marklint.ast.builder import NodeBuilder
from marklint.ast.nodes import Node, RealSpan
from marklint.location import Location, OutOfRangeError
from marklint.settings import Settings

_RESERVED_KEYS = frozenset({"type", "children", "position", "value"})


class MalformedTreeError(ValueError):
    """Raised when serialized tree data does not describe a valid node tree."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class TreeSafetyError(Exception):
    """Raised when tree input violates size or depth limits.

    Distinct from malformed input: these guard against oversized or
    pathologically nested documents.
    """


class TreeLoader:
    """Builds a ``Node`` tree from the serialized output of a markdown parser.

    Each node is a mapping with ``type``, optional ``children``, optional
    ``value`` and optional ``position`` (``{"start": {"line", "column",
    "offset"}, "end": {...}}``).  A node without ``position`` is generated.
    When ``offset`` is missing it is recovered from line/column, which
    needs the document text.  Other keys become the node's ``data``.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._yaml = YAML(typ="safe", pure=True)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path, text: str | None = None) -> Node:
        """Load a tree file; ``text`` is the document the tree was parsed from."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, text)

    def load_string(self, content: str, text: str | None = None) -> Node:
        if len(content) > self._settings.max_document_size:
            raise TreeSafetyError(
                f"Tree document exceeds maximum size "
                f"({len(content):,} chars > {self._settings.max_document_size:,} limit)"
            )
        try:
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise MalformedTreeError(f"Cannot parse tree document: {exc}") from exc
        if data is None:
            raise MalformedTreeError("Tree document is empty")
        return self.from_dict(data, text)

    def from_dict(self, data: Any, text: str | None = None) -> Node:
        location = Location(text) if text is not None else None
        counter = [0]
        return self._build(data, location, "root", 0, None, counter)

    # -- conversion ------------------------------------------------------------

    def _build(
        self,
        data: Any,
        location: Location | None,
        path: str,
        depth: int,
        parent_span: RealSpan | None,
        counter: list[int],
    ) -> Node:
        counter[0] += 1
        if counter[0] > self._settings.max_node_count:
            raise TreeSafetyError(
                f"Tree exceeds maximum node count ({self._settings.max_node_count:,})"
            )
        if depth > self._settings.max_tree_depth:
            raise TreeSafetyError(
                f"Tree exceeds maximum depth ({self._settings.max_tree_depth})"
            )
        if not isinstance(data, Mapping):
            raise MalformedTreeError("node must be a mapping", path)
        type_ = data.get("type")
        if not isinstance(type_, str) or not type_:
            raise MalformedTreeError("node has no 'type'", path)

        builder = NodeBuilder(type_)
        span: RealSpan | None = None
        if data.get("position") is not None:
            span = self._span(data["position"], location, path)
            if parent_span is not None and not parent_span.contains(span):
                raise MalformedTreeError(
                    f"span [{span.start}, {span.end}) lies outside its parent "
                    f"[{parent_span.start}, {parent_span.end})",
                    path,
                )
            builder.at(span.start, span.end)

        value = data.get("value")
        if value is not None:
            if not isinstance(value, str):
                raise MalformedTreeError("'value' must be a string", path)
            builder.value(value)

        children = data.get("children")
        if children is None:
            children = []
        if not isinstance(children, list):
            raise MalformedTreeError("'children' must be a list", path)
        # Generated nodes do not bound their children; the nearest real ancestor does.
        bound = span if span is not None else parent_span
        for i, child in enumerate(children):
            builder.child(
                self._build(child, location, f"{path}.children[{i}]", depth + 1, bound, counter)
            )

        builder.with_data(**{str(k): v for k, v in data.items() if k not in _RESERVED_KEYS})
        return builder.build()

    def _span(self, position: Any, location: Location | None, path: str) -> RealSpan:
        if not isinstance(position, Mapping):
            raise MalformedTreeError("'position' must be a mapping", path)
        start = self._offset(position.get("start"), location, f"{path}.position.start")
        end = self._offset(position.get("end"), location, f"{path}.position.end")
        if end < start:
            raise MalformedTreeError(f"span ends ({end}) before it starts ({start})", path)
        return RealSpan(start, end)

    @staticmethod
    def _offset(point: Any, location: Location | None, path: str) -> int:
        if not isinstance(point, Mapping):
            raise MalformedTreeError("point must be a mapping", path)
        offset = point.get("offset")
        if offset is not None:
            if not isinstance(offset, int) or isinstance(offset, bool) or offset < 0:
                raise MalformedTreeError(f"invalid offset {offset!r}", path)
            if location is not None and offset > location.length:
                raise MalformedTreeError(f"offset {offset} is past the end of the text", path)
            return offset
        line, column = point.get("line"), point.get("column")
        if not isinstance(line, int) or not isinstance(column, int):
            raise MalformedTreeError("point needs an 'offset' or 'line' and 'column'", path)
        if location is None:
            raise MalformedTreeError(
                "point has no 'offset'; pass the document text to resolve line/column", path
            )
        try:
            return location.to_offset(line, column)
        except OutOfRangeError as exc:
            raise MalformedTreeError(str(exc), path) from exc
