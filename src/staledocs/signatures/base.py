"""Signature extractor interface and strategy selection.

Two interchangeable strategies implement ``SignatureExtractor``:

- ``tree`` - walks a LibCST syntax tree of the whole module
- ``lexer`` - a forward-only token scan that never builds a tree

Each extractor owns its own cursor over the source; they share no state.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Literal

if TYPE_CHECKING:
    from staledocs.signatures.models import Signature


ExtractionStrategyType = Literal["tree", "lexer"]


class ExtractionStrategy(str, Enum):
    """Supported signature extraction strategies."""

    TREE = "tree"
    LEXER = "lexer"


class SignatureExtractor:
    """Base class for signature extractors.

    Parameters
    ----------
    skip_variadic_params : bool
        Drop ``*args``/``**kwargs`` style parameters during extraction.
    """

    strategy: ExtractionStrategy

    def __init__(self, skip_variadic_params: bool = True) -> None:
        self.skip_variadic_params = skip_variadic_params

    def extract(self, source: str) -> Iterator[Signature]:
        """Yield the signature of every function definition in ``source``.

        Raises
        ------
        ScanError
            If the source is structurally incomplete.
        """
        raise NotImplementedError


def get_extractor(
    strategy: ExtractionStrategy | ExtractionStrategyType,
    skip_variadic_params: bool = True,
) -> SignatureExtractor:
    """Get the extractor implementing a strategy.

    Parameters
    ----------
    strategy : ExtractionStrategy | str
        ``"tree"`` or ``"lexer"``.
    skip_variadic_params : bool
        Passed to the extractor.

    Returns
    -------
    SignatureExtractor
        A fresh extractor instance.
    """
    from staledocs.signatures.lexer import LexerSignatureExtractor
    from staledocs.signatures.tree import TreeSignatureExtractor

    extractors: dict[ExtractionStrategy, type[SignatureExtractor]] = {
        ExtractionStrategy.TREE: TreeSignatureExtractor,
        ExtractionStrategy.LEXER: LexerSignatureExtractor,
    }

    return extractors[ExtractionStrategy(strategy)](skip_variadic_params)


def extract_signatures(
    source: str,
    strategy: ExtractionStrategy | ExtractionStrategyType = ExtractionStrategy.TREE,
    *,
    skip_variadic_params: bool = True,
) -> Iterator[Signature]:
    """Extract function signatures from a whole source file.

    Examples
    --------
    >>> sigs = list(extract_signatures("def f(x, y: int):\\n    pass\\n"))
    >>> [str(p) for p in sigs[0].params]
    ['x', 'y: int']
    """
    return get_extractor(strategy, skip_variadic_params).extract(source)
