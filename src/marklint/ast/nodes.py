"""Immutable document tree nodes. Rules read these; nothing mutates them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RealSpan:
    """Source range of a node the parser read from the text: ``[start, end)``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def contains(self, other: RealSpan) -> bool:
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True)
class Synthesized:
    """Marker span for nodes the parser generated without source text."""


SYNTHESIZED = Synthesized()

Span = RealSpan | Synthesized


@dataclass(frozen=True)
class Node:
    """A typed tree node.

    ``data`` holds parser extras such as ``depth`` on headings or
    ``spread`` on lists; it does not take part in equality.
    """

    type: str
    children: tuple[Node, ...] = ()
    span: Span = SYNTHESIZED
    value: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def generated(self) -> bool:
        return isinstance(self.span, Synthesized)

    @property
    def real_span(self) -> RealSpan | None:
        return self.span if isinstance(self.span, RealSpan) else None

    @property
    def is_leaf(self) -> bool:
        return not self.children
