"""Docstring location and args section parsing.

Supports Google and NumPy styles, plus auto-detection.
"""
from staledocs.docstrings.literal import extract_docstring, find_docstring_span, has_docstring
from staledocs.docstrings.parser import DocstringParser, parse_documented_params
from staledocs.docstrings.styles import DocstringStyle, DocumentedParam

__all__ = [
    "DocstringParser",
    "DocstringStyle",
    "DocumentedParam",
    "extract_docstring",
    "find_docstring_span",
    "has_docstring",
    "parse_documented_params",
]
