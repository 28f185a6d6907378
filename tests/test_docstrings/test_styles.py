"""
Tests for staledocs.docstrings.styles module.
"""
from __future__ import annotations

import pytest

from staledocs.docstrings.parser import DocstringParser
from staledocs.docstrings.styles import DocstringStyle, DocumentedParam


class TestDocstringStyle:
    """Tests for the DocstringStyle enum."""

    @pytest.mark.parametrize("value", ["google", "numpy", "auto"])
    def test_from_string(self, value):
        assert DocstringStyle(value).value == value

    def test_is_a_string(self):
        """Styles compare equal to their plain string values."""
        assert DocstringStyle.GOOGLE == "google"

    def test_unknown_style_rejected(self):
        with pytest.raises(ValueError):
            DocstringParser(style="sphinx")


class TestDocumentedParam:
    """Tests for the DocumentedParam dataclass."""

    def test_str_with_type(self):
        assert str(DocumentedParam("x", "int")) == "x: int"

    def test_str_without_type(self):
        assert str(DocumentedParam("x")) == "x"

    def test_is_hashable_and_comparable(self):
        assert DocumentedParam("x", "int") == DocumentedParam("x", "int")
        assert len({DocumentedParam("x"), DocumentedParam("x")}) == 1
