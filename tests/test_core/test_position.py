"""
Tests for staledocs.core.position module.
"""
from __future__ import annotations

import pytest
from libcst.metadata import CodePosition

from staledocs.core.position import LineIndex, Span


class TestSpan:
    def test_resolve(self):
        assert Span(4, 9).resolve("def greet():") == "greet"

    def test_empty_span(self):
        assert Span(3, 3).resolve("abcdef") == ""


class TestLineIndex:
    SOURCE = "a = 1\nb = 2\n\ndef f():\n    pass\n"

    @pytest.mark.parametrize(
        "offset,line",
        [(0, 1), (5, 1), (6, 2), (12, 3), (13, 4), (len(SOURCE), 6)],
    )
    def test_line_of(self, offset, line):
        assert LineIndex(self.SOURCE).line_of(offset) == line

    def test_offset_of(self):
        index = LineIndex(self.SOURCE)

        assert index.offset_of(4, 4) == self.SOURCE.index("f()")
        assert index.offset_of_position(CodePosition(2, 0)) == 6
