"""Offset <-> line/column conversion over one source buffer."""

from __future__ import annotations

import re
from bisect import bisect_right

from marklint.models.diagnostics import Position

# "\r\n" must come first so a Windows break counts as one boundary.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class OutOfRangeError(ValueError):
    """Raised when an offset or line/column pair falls outside the buffer."""

    def __init__(self, message: str, *, offset: int | None = None, length: int | None = None) -> None:
        self.offset = offset
        self.length = length
        super().__init__(message)


class Location:
    """Resolves flat offsets in ``text`` to 1-based line/column positions.

    Built once per document.  Line starts are recorded on construction and
    never change, so a failed lookup leaves the resolver usable.
    """

    def __init__(self, text: str) -> None:
        self._length = len(text)
        starts = [0]
        starts.extend(m.end() for m in _LINE_BREAK_RE.finditer(text))
        self._line_starts: tuple[int, ...] = tuple(starts)

    @property
    def length(self) -> int:
        return self._length

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, line: int) -> int:
        """Return the offset of the first character on ``line`` (1-based)."""
        if not 1 <= line <= len(self._line_starts):
            raise OutOfRangeError(
                f"Line {line} is outside the document (1..{len(self._line_starts)})"
            )
        return self._line_starts[line - 1]

    def to_position(self, offset: int) -> Position:
        """Convert a zero-based offset in ``[0, length]`` to a Position."""
        if offset < 0 or offset > self._length:
            raise OutOfRangeError(
                f"Offset {offset} is outside the document (0..{self._length})",
                offset=offset,
                length=self._length,
            )
        index = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[index]
        return Position(line=index + 1, column=offset - line_start + 1, offset=offset)

    def to_offset(self, position: Position | int, column: int | None = None) -> int:
        """Convert a Position (or a ``line, column`` pair) back to an offset.

        The column may point one past the last character of a line (where
        its line break, or the end of the buffer, sits) but no further.
        """
        if isinstance(position, Position):
            line, column = position.line, position.column
        else:
            line = position
            if column is None:
                raise TypeError("to_offset() needs a column when given a line number")
        start = self.line_start(line)
        if line < len(self._line_starts):
            limit = self._line_starts[line] - 1
        else:
            limit = self._length
        offset = start + column - 1
        if column < 1 or offset > limit:
            raise OutOfRangeError(
                f"Column {column} is outside line {line}",
                offset=offset,
                length=self._length,
            )
        return offset
