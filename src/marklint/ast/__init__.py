"""Document tree nodes, traversal and construction helpers."""

from marklint.ast.builder import NodeBuilder, TreeBuilder
from marklint.ast.nodes import SYNTHESIZED, Node, RealSpan, Span, Synthesized
from marklint.ast.visitor import visit, walk

__all__ = [
    "SYNTHESIZED",
    "Node",
    "NodeBuilder",
    "RealSpan",
    "Span",
    "Synthesized",
    "TreeBuilder",
    "visit",
    "walk",
]
