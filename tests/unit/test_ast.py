"""Tests for tree nodes, visitor, and builder."""

from __future__ import annotations

import pytest

from marklint.ast.builder import NodeBuilder, TreeBuilder
from marklint.ast.nodes import SYNTHESIZED, Node, RealSpan, Synthesized
from marklint.ast.visitor import visit, walk
from tests.conftest import INVALID_MD, build_invalid_tree


def _sample_tree() -> Node:
    #        a
    #      / | \
    #     b  e  f
    #    / \     \
    #   c   d     g
    return Node(
        "a",
        (
            Node("b", (Node("c"), Node("d"))),
            Node("e"),
            Node("f", (Node("g"),)),
        ),
    )


class TestSpans:
    def test_real_span(self) -> None:
        span = RealSpan(2, 5)
        assert span.start == 2
        assert span.end == 5

    def test_empty_span_allowed(self) -> None:
        assert RealSpan(3, 3).end == 3

    @pytest.mark.parametrize("start,end", [(-1, 2), (5, 4)])
    def test_invalid_span(self, start: int, end: int) -> None:
        with pytest.raises(ValueError):
            RealSpan(start, end)

    def test_contains(self) -> None:
        assert RealSpan(0, 10).contains(RealSpan(2, 10))
        assert not RealSpan(0, 10).contains(RealSpan(2, 11))


class TestNode:
    def test_default_node_is_generated(self) -> None:
        node = Node("paragraph")
        assert node.generated
        assert node.span is SYNTHESIZED
        assert isinstance(node.span, Synthesized)
        assert node.real_span is None

    def test_positioned_node(self) -> None:
        node = Node("heading", span=RealSpan(0, 5))
        assert not node.generated
        assert node.real_span == RealSpan(0, 5)

    def test_leaf(self) -> None:
        assert Node("text", value="x").is_leaf
        assert not _sample_tree().is_leaf

    def test_frozen(self) -> None:
        node = Node("heading")
        with pytest.raises(AttributeError):
            node.type = "paragraph"  # type: ignore[misc]

    def test_data_not_part_of_equality(self) -> None:
        assert Node("heading", data={"depth": 1}) == Node("heading", data={"depth": 2})


class TestWalk:
    def test_pre_order(self) -> None:
        order = [node.type for node, _, _ in walk(_sample_tree())]
        assert order == ["a", "b", "c", "d", "e", "f", "g"]

    def test_root_has_no_index_or_parent(self) -> None:
        tree = _sample_tree()
        node, index, parent = next(walk(tree))
        assert node is tree
        assert index is None
        assert parent is None

    def test_index_and_parent(self) -> None:
        tree = _sample_tree()
        for node, index, parent in walk(tree):
            if parent is not None:
                assert parent.children[index] is node

    def test_every_node_exactly_once(self) -> None:
        tree = build_invalid_tree()
        seen = [id(node) for node, _, _ in walk(tree)]
        assert len(seen) == len(set(seen)) == 15

    def test_parent_before_child(self) -> None:
        tree = build_invalid_tree()
        seen: set[int] = set()
        for node, _, parent in walk(tree):
            if parent is not None:
                assert id(parent) in seen
            seen.add(id(node))

    def test_type_filter_still_descends(self) -> None:
        order = [node.type for node, _, _ in walk(_sample_tree(), types={"c", "g"})]
        assert order == ["c", "g"]

    def test_single_type_filter(self) -> None:
        headings = [n for n, _, _ in walk(build_invalid_tree(), "heading")]
        assert [h.data["depth"] for h in headings] == [1, 2]

    def test_duplicate_children_not_deduplicated(self) -> None:
        shared = Node("text", value="x")
        tree = Node("paragraph", (shared, shared))
        assert [index for _, index, _ in walk(tree)] == [None, 0, 1]

    def test_deep_tree(self) -> None:
        tree = Node("leaf")
        for _ in range(5000):
            tree = Node("wrap", (tree,))
        assert sum(1 for _ in walk(tree)) == 5001


class TestVisit:
    def test_visitor_receives_triples(self) -> None:
        calls: list[tuple[str, int | None, str | None]] = []
        visit(
            _sample_tree(),
            lambda node, index, parent: calls.append(
                (node.type, index, parent.type if parent else None)
            ),
        )
        assert calls == [
            ("a", None, None),
            ("b", 0, "a"),
            ("c", 0, "b"),
            ("d", 1, "b"),
            ("e", 1, "a"),
            ("f", 2, "a"),
            ("g", 0, "f"),
        ]

    def test_filtered_visit(self) -> None:
        types: list[str] = []
        visit(build_invalid_tree(), lambda node, index, parent: types.append(node.type), "list")
        assert types == ["list", "list"]


class TestTreeBuilder:
    def test_spans_resolved_from_line_column(self) -> None:
        b = TreeBuilder(INVALID_MD)
        heading = b.node("heading", (2, 1), (2, 7), depth=2)
        assert heading.real_span == RealSpan(6, 12)
        assert heading.data["depth"] == 2

    def test_root_spans_whole_text(self) -> None:
        b = TreeBuilder("Alpha\n")
        assert b.root().real_span == RealSpan(0, 6)

    def test_generated(self) -> None:
        b = TreeBuilder("Alpha\n")
        node = b.generated("paragraph", b.text("Alpha", (1, 1), (1, 6)))
        assert node.generated
        assert not node.children[0].generated


class TestNodeBuilder:
    def test_build_positioned(self) -> None:
        node = (
            NodeBuilder("heading")
            .at(0, 5)
            .child(Node("text", value="Foo", span=RealSpan(2, 5)))
            .with_data(depth=1)
            .build()
        )
        assert node.real_span == RealSpan(0, 5)
        assert node.children[0].value == "Foo"
        assert node.data == {"depth": 1}

    def test_build_without_position_is_generated(self) -> None:
        node = NodeBuilder("text").value("x").build()
        assert node.generated
        assert node.value == "x"
