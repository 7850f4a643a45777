"""Shared test fixtures for marklint."""

from __future__ import annotations

from pathlib import Path

import pytest

from marklint.ast.builder import TreeBuilder
from marklint.ast.nodes import Node, RealSpan
from marklint.parser.loader import TreeLoader
from marklint.runner import LintRunner
from marklint.sink import DiagnosticSink, Document

FIXTURES_DIR = Path(__file__).parent / "fixtures"

INVALID_MD = "# Foo\n## Bar\n\n- Paragraph\n  + List.\n\nParagraph.\n"

VALID_MD = "# Foo\n\n## Bar\n\n- Paragraph\n\n  + List.\n\nParagraph.\n"


def text_only_tree(text: str) -> Node:
    """A bare root, enough for rules that only read the source text."""
    return Node(type="root", span=RealSpan(0, len(text)))


def make_sink(text: str, tree: Node | None = None) -> DiagnosticSink:
    return DiagnosticSink(Document(text, tree if tree is not None else text_only_tree(text)))


def build_invalid_tree() -> Node:
    """Tree for INVALID_MD, shaped like markdown parser output."""
    b = TreeBuilder(INVALID_MD)
    return b.root(
        b.node("heading", (1, 1), (1, 6), b.text("Foo", (1, 3), (1, 6)), depth=1),
        b.node("heading", (2, 1), (2, 7), b.text("Bar", (2, 4), (2, 7)), depth=2),
        b.node(
            "list",
            (4, 1),
            (5, 10),
            b.node(
                "listItem",
                (4, 1),
                (5, 10),
                b.node("paragraph", (4, 3), (4, 12), b.text("Paragraph", (4, 3), (4, 12))),
                b.node(
                    "list",
                    (5, 3),
                    (5, 10),
                    b.node(
                        "listItem",
                        (5, 3),
                        (5, 10),
                        b.node("paragraph", (5, 5), (5, 10), b.text("List.", (5, 5), (5, 10))),
                        spread=False,
                    ),
                    spread=False,
                ),
                spread=False,
            ),
            spread=False,
        ),
        b.node("paragraph", (7, 1), (7, 11), b.text("Paragraph.", (7, 1), (7, 11))),
    )


def build_valid_tree() -> Node:
    """Tree for VALID_MD: the same blocks, each separated by a blank line."""
    b = TreeBuilder(VALID_MD)
    return b.root(
        b.node("heading", (1, 1), (1, 6), b.text("Foo", (1, 3), (1, 6)), depth=1),
        b.node("heading", (3, 1), (3, 7), b.text("Bar", (3, 4), (3, 7)), depth=2),
        b.node(
            "list",
            (5, 1),
            (7, 10),
            b.node(
                "listItem",
                (5, 1),
                (7, 10),
                b.node("paragraph", (5, 3), (5, 12), b.text("Paragraph", (5, 3), (5, 12))),
                b.node(
                    "list",
                    (7, 3),
                    (7, 10),
                    b.node(
                        "listItem",
                        (7, 3),
                        (7, 10),
                        b.node("paragraph", (7, 5), (7, 10), b.text("List.", (7, 5), (7, 10))),
                    ),
                ),
                spread=True,
            ),
            spread=True,
        ),
        b.node("paragraph", (9, 1), (9, 11), b.text("Paragraph.", (9, 1), (9, 11))),
    )


@pytest.fixture
def loader() -> TreeLoader:
    return TreeLoader()


@pytest.fixture
def runner() -> LintRunner:
    return LintRunner()


@pytest.fixture
def invalid_tree() -> Node:
    return build_invalid_tree()


@pytest.fixture
def valid_tree() -> Node:
    return build_valid_tree()
