"""Locate a leading triple-quoted literal in a block of source text."""
from __future__ import annotations

from staledocs.core.position import Span

DOCSTRING_DELIMITERS = ('"""', "'''")


def find_docstring_span(source: str, start: int = 0, end: int | None = None) -> Span | None:
    """Find the docstring literal beginning exactly at ``start``.

    The span covers the opening delimiter, the content and the closing
    delimiter. The closing delimiter is searched from ``start + 3``.

    Parameters
    ----------
    source : str
        Text containing the block, typically the whole file.
    start : int
        Offset where the block begins.
    end : int | None
        Offset where the block ends; the closing delimiter must lie within.

    Returns
    -------
    Span | None
        The literal's span, or None if the block does not start with a
        delimiter or the delimiter is never closed.
    """
    for delimiter in DOCSTRING_DELIMITERS:
        if source.startswith(delimiter, start, end):
            close = source.find(delimiter, start + 3, end)
            if close == -1:
                return None
            return Span(start, close + 3)
    return None


def extract_docstring(block: str) -> str | None:
    """Extract the docstring from the text of a function body.

    Parameters
    ----------
    block : str
        Body text, starting at the first statement.

    Returns
    -------
    str | None
        The literal including its delimiters, or None if there is none.

    Examples
    --------
    >>> extract_docstring("'''Hey.'''\\nx = 2")
    "'''Hey.'''"
    >>> extract_docstring("x = 2") is None
    True
    """
    span = find_docstring_span(block)
    return span.resolve(block) if span is not None else None


def has_docstring(block: str) -> bool:
    """Check if a function body starts with a docstring."""
    return find_docstring_span(block) is not None
