"""Pre-order traversal over document trees."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from marklint.ast.nodes import Node

Visitor = Callable[[Node, int | None, Node | None], object]


def _type_filter(types: str | Iterable[str] | None) -> frozenset[str] | None:
    if types is None:
        return None
    if isinstance(types, str):
        return frozenset((types,))
    return frozenset(types)


def walk(
    tree: Node, types: str | Iterable[str] | None = None
) -> Iterator[tuple[Node, int | None, Node | None]]:
    """Yield ``(node, index, parent)`` for every node, parent before children.

    The root comes first with ``index`` and ``parent`` set to None.  When
    ``types`` is given, other nodes are not yielded but their children are
    still walked.  Uses an explicit stack, so depth is not bounded by the
    interpreter's recursion limit.
    """
    wanted = _type_filter(types)
    stack: list[tuple[Node, int | None, Node | None]] = [(tree, None, None)]
    while stack:
        node, index, parent = stack.pop()
        if wanted is None or node.type in wanted:
            yield node, index, parent
        # Reversed so the first child is popped first.
        for i in range(len(node.children) - 1, -1, -1):
            stack.append((node.children[i], i, node))


def visit(tree: Node, visitor: Visitor, types: str | Iterable[str] | None = None) -> None:
    """Call ``visitor(node, index, parent)`` for every node in pre-order."""
    for node, index, parent in walk(tree, types):
        visitor(node, index, parent)

