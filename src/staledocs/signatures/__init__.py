"""Function signature extraction.

This package provides:
- Parameter, Signature: Extracted signature data
- SignatureExtractor: Interface implemented by each strategy
- TreeSignatureExtractor: Strategy walking a LibCST tree
- LexerSignatureExtractor: Strategy scanning tokens without a tree
- extract_signatures: Extract every function signature from source
"""
from staledocs.signatures.base import (
    ExtractionStrategy,
    SignatureExtractor,
    extract_signatures,
    get_extractor,
)
from staledocs.signatures.lexer import LexerSignatureExtractor
from staledocs.signatures.models import Parameter, Signature
from staledocs.signatures.tree import TreeSignatureExtractor

__all__ = [
    "ExtractionStrategy",
    "LexerSignatureExtractor",
    "Parameter",
    "Signature",
    "SignatureExtractor",
    "TreeSignatureExtractor",
    "extract_signatures",
    "get_extractor",
]
