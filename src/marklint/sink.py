"""Per-document diagnostic collection."""

from __future__ import annotations

from marklint.ast.nodes import Node, RealSpan
from marklint.ast.visitor import walk
from marklint.location import Location
from marklint.models.diagnostics import Diagnostic, Position, PositionRange, Severity

Locatable = Node | Position | PositionRange | int | None


class Document:
    """One source text together with its parsed tree and position resolver."""

    def __init__(self, text: str, tree: Node) -> None:
        self.text = text
        self.tree = tree
        self.location = Location(text)
        self._parents: dict[int, Node] | None = None

    def parent_of(self, node: Node) -> Node | None:
        """Parent of ``node`` in this document's tree.

        Lookup is by identity. A node instance placed under several parents
        resolves to the last of them; pass ``parent`` to ``anchor`` (or to
        ``DiagnosticSink.report``) when a rule knows which occurrence it means.
        """
        if self._parents is None:
            self._parents = {
                id(child): parent for child, _, parent in walk(self.tree) if parent is not None
            }
        return self._parents.get(id(node))

    def anchor(self, node: Node, parent: Node | None = None) -> RealSpan | None:
        """Span of ``node``, or of its nearest ancestor that has one."""
        if node.real_span is not None:
            return node.real_span
        current = parent if parent is not None else self.parent_of(node)
        while current is not None:
            span = current.real_span
            if span is not None:
                return span
            current = self.parent_of(current)
        return None

    def range_of(self, span: RealSpan) -> PositionRange:
        return PositionRange(
            start=self.location.to_position(span.start),
            end=self.location.to_position(span.end),
        )

    def start_line(self, node: Node) -> int | None:
        span = node.real_span
        return None if span is None else self.location.to_position(span.start).line

    def end_line(self, node: Node) -> int | None:
        span = node.real_span
        return None if span is None else self.location.to_position(span.end).line


class DiagnosticSink:
    """Append-only list of diagnostics for one rule run over one document.

    Diagnostics keep insertion order and are never removed; identical
    reports at the same place are all kept.
    """

    def __init__(
        self,
        document: Document,
        *,
        rule_id: str | None = None,
        source: str | None = None,
        severity: Severity = Severity.WARNING,
    ) -> None:
        self.document = document
        self.rule_id = rule_id
        self.source = source
        self.severity = severity
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def report(
        self, message: str, locatable: Locatable = None, *, parent: Node | None = None
    ) -> Diagnostic:
        """Record ``message`` at ``locatable``.

        A generated node is located at its nearest positioned ancestor,
        starting from ``parent`` when given; with none the diagnostic is
        recorded without a location.

        Raises ``OutOfRangeError`` for an offset outside the text and
        ``TypeError`` for an unsupported locatable. Both are bugs in the
        calling rule, not style violations; the runner records them as a
        failure of that rule.
        """
        position: Position | None = None
        range_: PositionRange | None = None

        if isinstance(locatable, Node):
            span = self.document.anchor(locatable, parent)
            if span is not None:
                range_ = self.document.range_of(span)
                position = range_.start
        elif isinstance(locatable, PositionRange):
            range_ = locatable
            position = locatable.start
        elif isinstance(locatable, Position):
            position = locatable
        elif isinstance(locatable, int) and not isinstance(locatable, bool):
            position = self.document.location.to_position(locatable)
        elif locatable is not None:
            raise TypeError(f"Cannot locate a diagnostic at {type(locatable).__name__}")

        diagnostic = Diagnostic(
            message=message,
            position=position,
            range=range_,
            rule_id=self.rule_id,
            source=self.source,
            severity=self.severity,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic
