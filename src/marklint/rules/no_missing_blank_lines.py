"""Warn when a blank line is missing before a block node.

Pass ``{"exceptTightLists": true}`` to allow tight list items without
blank lines between their contents.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from marklint.ast.nodes import Node
from marklint.ast.visitor import walk
from marklint.rules.registry import rule
from marklint.sink import DiagnosticSink

REASON = "Missing blank line before block node"

BLOCK_TYPES = frozenset(
    {
        "paragraph",
        "blockquote",
        "heading",
        "code",
        "yaml",
        "html",
        "list",
        "table",
        "thematicBreak",
    }
)

TIGHT_CONTAINER = "listItem"


class MissingBlankLinesOptions(BaseModel):
    except_tight_lists: bool = Field(False, alias="exceptTightLists")

    model_config = {"populate_by_name": True, "extra": "forbid", "frozen": True, "strict": True}


def parse_options(setting: Any) -> MissingBlankLinesOptions:
    if setting is None or setting is True:
        return MissingBlankLinesOptions()
    if isinstance(setting, MissingBlankLinesOptions):
        return setting
    if not isinstance(setting, Mapping):
        raise TypeError(f"expected an options mapping, not {type(setting).__name__}")
    return MissingBlankLinesOptions.model_validate(dict(setting))


@rule("no-missing-blank-lines", options=parse_options)
def no_missing_blank_lines(
    tree: Node, sink: DiagnosticSink, options: MissingBlankLinesOptions
) -> None:
    """Warn when a blank line is missing before a block node."""
    document = sink.document

    for node, index, parent in walk(tree):
        if node.generated or parent is None or index is None:
            continue
        if options.except_tight_lists and parent.type == TIGHT_CONTAINER:
            continue
        if index + 1 >= len(parent.children):
            continue
        following = parent.children[index + 1]
        if following.type not in BLOCK_TYPES or following.generated:
            continue
        if document.start_line(following) == document.end_line(node) + 1:
            sink.report(REASON, following)
