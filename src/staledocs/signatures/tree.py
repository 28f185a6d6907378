"""Signature extraction from a LibCST syntax tree.

Every node of the module is offered to ``extract_from_node``; only
``FunctionDef`` nodes produce a signature. Positions come from LibCST's
``PositionProvider`` and are turned into spans over the original source.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterator

import libcst as cst
from libcst.metadata import CodeRange, MetadataWrapper, PositionProvider

from staledocs.core.errors import InvariantError, ScanError
from staledocs.core.position import LineIndex, Span
from staledocs.docstrings.literal import find_docstring_span
from staledocs.signatures.base import ExtractionStrategy, SignatureExtractor
from staledocs.signatures.models import Parameter, Signature, keep_parameter

logger = logging.getLogger(__name__)


class TreeSignatureExtractor(SignatureExtractor):
    """Extract signatures by walking the LibCST tree of a module.

    Parameters with a default value contribute only their name, even when
    annotated. The lexer strategy keeps such annotations; the difference is
    deliberate and covered by tests.

    Examples
    --------
    >>> extractor = TreeSignatureExtractor()
    >>> sig = next(extractor.extract("def f(self, x: int, y: str = \"\"):\\n    pass\\n"))
    >>> [str(p) for p in sig.params]
    ['x: int', 'y']
    """

    strategy = ExtractionStrategy.TREE

    def extract(self, source: str) -> Iterator[Signature]:
        try:
            module = cst.parse_module(source)
        except cst.ParserSyntaxError as e:
            raise ScanError(
                f"cannot parse source at line {e.raw_line}, column {e.raw_column}: {e.message}"
            ) from e

        wrapper = MetadataWrapper(module)
        collector = _SignatureCollector(self, source)
        wrapper.visit(collector)
        logger.debug("tree strategy found %d functions", len(collector.signatures))
        yield from collector.signatures

    def extract_from_node(
        self,
        node: cst.CSTNode,
        source: str,
        positions: Mapping[cst.CSTNode, CodeRange],
        index: LineIndex,
    ) -> Signature | None:
        """Build the signature of a function definition node.

        Parameters
        ----------
        node : cst.CSTNode
            Any node of the module; non-function nodes yield None.
        source : str
            The source the module was parsed from.
        positions : Mapping[cst.CSTNode, CodeRange]
            Resolved ``PositionProvider`` metadata for the module.
        index : LineIndex
            Line index over ``source``.

        Returns
        -------
        Signature | None
            The signature, or None if ``node`` is not a function definition.
        """
        if not isinstance(node, cst.FunctionDef):
            return None

        def span_of(child: cst.CSTNode) -> Span:
            try:
                code_range = positions[child]
            except KeyError:
                raise InvariantError(
                    f"no position recorded for {type(child).__name__} node"
                ) from None
            return Span(
                index.offset_of_position(code_range.start),
                index.offset_of_position(code_range.end),
            )

        params: list[Parameter] = []
        for prefix, param in _iter_params(node.params):
            name = prefix + param.name.value
            if not keep_parameter(name, self.skip_variadic_params):
                continue
            if param.default is not None:
                params.append(Parameter(name))
            elif param.annotation is not None:
                annotation = span_of(param.annotation.annotation).resolve(source)
                params.append(Parameter(name, annotation))
            else:
                params.append(Parameter(name))

        function_span = span_of(node)
        block_start = span_of(_first_statement(node)).start

        return Signature(
            source=source,
            name_span=span_of(node.name),
            line=positions[node.name].start.line,
            params=params,
            docstring_span=find_docstring_span(source, block_start, function_span.end),
        )


class _SignatureCollector(cst.CSTVisitor):
    """Visitor offering every node to the extractor, in source order."""

    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self, extractor: TreeSignatureExtractor, source: str) -> None:
        super().__init__()
        self.extractor = extractor
        self.source = source
        self.index = LineIndex(source)
        self.signatures: list[Signature] = []

    def on_visit(self, node: cst.CSTNode) -> bool:
        signature = self.extractor.extract_from_node(
            node, self.source, self.metadata[PositionProvider], self.index
        )
        if signature is not None:
            self.signatures.append(signature)
        return True


def _iter_params(params: cst.Parameters) -> Iterator[tuple[str, cst.Param]]:
    """Yield ``(prefix, param)`` pairs in declaration order."""
    for param in params.posonly_params:
        yield "", param
    for param in params.params:
        yield "", param
    if isinstance(params.star_arg, cst.Param):
        yield "*", params.star_arg
    for param in params.kwonly_params:
        yield "", param
    if params.star_kwarg is not None:
        yield "**", params.star_kwarg


def _first_statement(node: cst.FunctionDef) -> cst.CSTNode:
    """Return the node where the function's body text begins."""
    body = node.body
    if not body.body:
        raise InvariantError(f"function {node.name.value!r} has an empty body")

    first = body.body[0]
    if isinstance(first, cst.SimpleStatementLine):
        return first.body[0]
    return first
