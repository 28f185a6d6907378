"""Utilities for offset and line number tracking over a source buffer.

Extracted text is represented as ``Span`` objects: half-open character
offsets into the immutable source string. Spans are resolved to text only
where the text is actually needed (comparison and diagnostics).
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from libcst.metadata import CodePosition


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` character range into a source string.

    Attributes
    ----------
    start : int
        Offset of the first character.
    end : int
        Offset one past the last character.
    """

    start: int
    end: int

    def resolve(self, source: str) -> str:
        """Return the text this span covers in ``source``."""
        return source[self.start:self.end]


class LineIndex:
    """Convert between character offsets and 1-indexed line numbers.

    Parameters
    ----------
    source : str
        The source text the offsets refer to.

    Examples
    --------
    >>> index = LineIndex("a = 1\\ndef f():\\n    pass\\n")
    >>> index.line_of(6)
    2
    >>> index.offset_of(2, 4)
    10
    """

    def __init__(self, source: str) -> None:
        self._line_starts = [0]
        for i, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(i + 1)

    def line_of(self, offset: int) -> int:
        """Return the 1-indexed line containing ``offset``."""
        return bisect_right(self._line_starts, offset)

    def offset_of(self, line: int, column: int) -> int:
        """Return the character offset of a 1-indexed line and 0-indexed column."""
        return self._line_starts[line - 1] + column

    def offset_of_position(self, position: CodePosition) -> int:
        """Return the character offset of a LibCST ``CodePosition``."""
        return self.offset_of(position.line, position.column)
