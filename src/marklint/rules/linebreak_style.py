"""Warn when line breaks violate a given or detected style.

Options: ``"unix"`` (``\\n``, shown as ␊), ``"windows"`` (``\\r\\n``, shown
as ␍␊), or ``"consistent"`` (default) to accept whichever style the first
line break in the document uses.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Any

from marklint.ast.nodes import Node
from marklint.consistency import ConsistencyTracker, preference_from_setting
from marklint.rules.registry import rule
from marklint.sink import DiagnosticSink


class LinebreakStyle(StrEnum):
    UNIX = "unix"
    WINDOWS = "windows"


ESCAPED = MappingProxyType({LinebreakStyle.UNIX: "\\n", LinebreakStyle.WINDOWS: "\\r\\n"})


def parse_options(setting: Any) -> LinebreakStyle | None:
    return preference_from_setting(setting, LinebreakStyle)


def classify(text: str, index: int) -> LinebreakStyle:
    """Kind of the ``\\n`` at ``index``; a break at offset 0 has no ``\\r`` before it."""
    if index > 0 and text[index - 1] == "\r":
        return LinebreakStyle.WINDOWS
    return LinebreakStyle.UNIX


@rule("linebreak-style", options=parse_options)
def linebreak_style(tree: Node, sink: DiagnosticSink, preferred: LinebreakStyle | None) -> None:
    """Warn when line breaks violate a given or detected style."""
    text = sink.document.text
    tracker: ConsistencyTracker[LinebreakStyle] = ConsistencyTracker(preferred)

    index = text.find("\n")
    while index != -1:
        found = classify(text, index)
        expected = tracker.check(found)
        if expected is not None:
            sink.report(
                f"Expected linebreaks to be {expected} (`{ESCAPED[expected]}`), "
                f"not {found} (`{ESCAPED[found]}`)",
                index,
            )
        index = text.find("\n", index + 1)
