"""Signature extraction with a forward-only token scan.

The scanner never builds a tree. It recognizes a minimal token set - the
``def`` keyword, brackets, ``,``, ``:``, ``=`` and a catch-all text token -
and reads each function header incrementally, so signatures are produced
lazily as the scan advances through the file.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from staledocs.core.errors import ScanError
from staledocs.core.position import LineIndex, Span
from staledocs.docstrings.literal import DOCSTRING_DELIMITERS, find_docstring_span
from staledocs.signatures.base import ExtractionStrategy, SignatureExtractor
from staledocs.signatures.models import Parameter, Signature, keep_parameter

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Kinds of tokens produced by ``tokenize``."""

    DEF = "def"
    PAR_OPEN = "("
    PAR_CLOSE = ")"
    BRACE_OPEN = "{"
    BRACE_CLOSE = "}"
    BRACKET_OPEN = "["
    BRACKET_CLOSE = "]"
    COMMA = ","
    COLON = ":"
    EQUALS = "="
    TEXT = "text"


PUNCTUATION = {kind.value: kind for kind in TokenKind if kind not in (TokenKind.DEF, TokenKind.TEXT)}

# An unterminated triple-quoted literal runs to the end of the source
_STRING = r"""[rRbBuUfF]{0,2}(?:"{3}(?:\\[\s\S]|[^\\])*?(?:"{3}|\Z)|'{3}(?:\\[\s\S]|[^\\])*?(?:'{3}|\Z)|"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*')"""

TOKEN_PATTERN = re.compile(
    r"(?P<skip>\s+|#[^\n]*)"
    rf"|(?P<string>{_STRING})"
    r"|(?P<operator>==|:=)"
    r"|(?P<punct>[(){}\[\],:=])"
    # An ``=`` glued to a preceding operator char (<=, !=, +=) stays text
    r"""|(?P<text>(?:[^\s(){}\[\],:=#'"]|(?<=[=!<>+\-*/%&|^@])=)+|['"])"""
)


@dataclass(frozen=True)
class Token:
    """A token with its span in the source.

    Attributes
    ----------
    kind : TokenKind
        The token kind.
    start : int
        Offset of the first character.
    end : int
        Offset one past the last character.
    """

    kind: TokenKind
    start: int
    end: int


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source``, skipping whitespace and comments.

    String literals are single text tokens, so brackets, commas and the
    word ``def`` inside strings are never seen as structure.

    Examples
    --------
    >>> [t.kind.value for t in tokenize("def f(x, y):")]
    ['def', 'text', '(', 'text', ',', 'text', ')', ':']
    """
    pos = 0
    while pos < len(source):
        match = TOKEN_PATTERN.match(source, pos)
        if match is None:
            raise ScanError(f"cannot tokenize source at offset {pos}", pos)
        start, pos = match.span()
        group = match.lastgroup

        if group == "skip":
            continue
        if group == "punct":
            yield Token(PUNCTUATION[match.group()], start, pos)
        elif match.group() == "def":
            yield Token(TokenKind.DEF, start, pos)
        else:
            yield Token(TokenKind.TEXT, start, pos)


class TokenStream:
    """Forward cursor over ``tokenize`` output with one token of pushback."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens = tokenize(source)
        self._pushed: Token | None = None
        self.last: Token | None = None

    def next(self) -> Token | None:
        """Return the next token, or None at the end of the source."""
        if self._pushed is not None:
            token, self._pushed = self._pushed, None
        else:
            token = next(self._tokens, None)
        if token is not None:
            self.last = token
        return token

    def expect(self, context: str) -> Token:
        """Return the next token; the source must not end here."""
        token = self.next()
        if token is None:
            raise ScanError(f"reached end of source {context}", len(self.source))
        return token

    def push_back(self, token: Token) -> None:
        self._pushed = token

    def text(self, token: Token) -> str:
        return self.source[token.start:token.end]


class LexerSignatureExtractor(SignatureExtractor):
    """Extract signatures from a token stream, one function at a time.

    Parameters keep their annotation even when they have a default value.

    Examples
    --------
    >>> extractor = LexerSignatureExtractor()
    >>> sig = next(extractor.extract("def f(x, y: int=2, z=323):\\n    pass\\n"))
    >>> sig.name, [str(p) for p in sig.params]
    ('f', ['x', 'y: int', 'z'])
    """

    strategy = ExtractionStrategy.LEXER

    def extract(self, source: str) -> Iterator[Signature]:
        tokens = TokenStream(source)
        index = LineIndex(source)
        count = 0

        while (token := tokens.next()) is not None:
            if token.kind is TokenKind.DEF:
                yield self._read_function(token, tokens, index)
                count += 1

        logger.debug("lexer strategy found %d functions", count)

    def _read_function(self, def_token: Token, tokens: TokenStream, index: LineIndex) -> Signature:
        """Read one function header and its docstring, starting after ``def``."""
        name = tokens.expect("after 'def'")
        if name.kind is not TokenKind.TEXT:
            raise ScanError(f"expected a function name, found {tokens.text(name)!r}", name.start)

        token = tokens.expect("before the parameter list")
        while token.kind is not TokenKind.PAR_OPEN:
            token = tokens.expect("before the parameter list")

        params = self._read_parameters(tokens)
        self._skip_header(tokens)

        return Signature(
            source=tokens.source,
            name_span=Span(name.start, name.end),
            line=index.line_of(def_token.start),
            params=params,
            docstring_span=self._read_docstring(tokens),
        )

    def _read_parameters(self, tokens: TokenStream) -> list[Parameter]:
        """Read parameter entries up to and including the closing paren."""
        params: list[Parameter] = []

        while True:
            token = tokens.expect("inside a parameter list")
            if token.kind is TokenKind.PAR_CLOSE:
                return params
            if token.kind is not TokenKind.TEXT:
                raise ScanError(
                    f"unexpected {tokens.text(token)!r} in parameter list", token.start
                )

            name = tokens.text(token)
            annotation = None
            separator = tokens.expect("inside a parameter list")

            if separator.kind is TokenKind.COLON:
                annotation, end = self._read_nested(tokens, stop_on_equals=True)
                if end is TokenKind.EQUALS:
                    _, end = self._read_nested(tokens, stop_on_equals=False)
            elif separator.kind is TokenKind.EQUALS:
                _, end = self._read_nested(tokens, stop_on_equals=False)
            elif separator.kind in (TokenKind.COMMA, TokenKind.PAR_CLOSE):
                end = separator.kind
            else:
                raise ScanError(
                    f"expected ',', ':', '=' or ')' after parameter {name!r}", separator.start
                )

            if keep_parameter(name, self.skip_variadic_params):
                params.append(Parameter(name, annotation))

            if end is TokenKind.PAR_CLOSE:
                return params

    def _read_nested(self, tokens: TokenStream, stop_on_equals: bool) -> tuple[str, TokenKind]:
        """Read an annotation or default value, which may nest brackets.

        Stops at a depth-zero ``,`` (or ``=`` when ``stop_on_equals``), or
        at the ``)`` closing the parameter list.

        Returns
        -------
        tuple[str, TokenKind]
            The trimmed text read and the kind of token it ended on.
        """
        start = tokens.last.end if tokens.last is not None else 0
        par = brace = bracket = 0

        while (token := tokens.next()) is not None:
            kind = token.kind
            if kind is TokenKind.PAR_OPEN:
                par += 1
            elif kind is TokenKind.PAR_CLOSE:
                par -= 1
                if par == -1:
                    if brace or bracket:
                        raise ScanError("unbalanced brackets in parameter list", token.start)
                    return tokens.source[start:token.start].strip(), kind
            elif kind is TokenKind.BRACE_OPEN:
                brace += 1
            elif kind is TokenKind.BRACE_CLOSE:
                brace -= 1
            elif kind is TokenKind.BRACKET_OPEN:
                bracket += 1
            elif kind is TokenKind.BRACKET_CLOSE:
                bracket -= 1
            elif par == brace == bracket == 0 and (
                kind is TokenKind.COMMA or (stop_on_equals and kind is TokenKind.EQUALS)
            ):
                return tokens.source[start:token.start].strip(), kind

            if brace < 0 or bracket < 0:
                raise ScanError("unbalanced brackets in parameter list", token.start)

        raise ScanError("reached end of source without enclosers", len(tokens.source))

    def _skip_header(self, tokens: TokenStream) -> None:
        """Skip the return annotation up to the ``:`` ending the header."""
        depth = 0
        while True:
            token = tokens.expect("before the end of the function header")
            if token.kind in (TokenKind.PAR_OPEN, TokenKind.BRACKET_OPEN, TokenKind.BRACE_OPEN):
                depth += 1
            elif token.kind in (TokenKind.PAR_CLOSE, TokenKind.BRACKET_CLOSE, TokenKind.BRACE_CLOSE):
                depth -= 1
            elif token.kind is TokenKind.COLON and depth == 0:
                return

    def _read_docstring(self, tokens: TokenStream) -> Span | None:
        """Return the docstring span if the body starts with one."""
        token = tokens.expect("before the function body")
        while token.kind is not TokenKind.TEXT:
            if token.kind is TokenKind.DEF:
                # Body starts with a nested function
                tokens.push_back(token)
                return None
            token = tokens.expect("before the function body")

        if not tokens.text(token).startswith(DOCSTRING_DELIMITERS):
            return None

        # Match the closing delimiter in the raw source, not the token stream
        span = find_docstring_span(tokens.source, token.start)
        if span is None:
            raise ScanError("unterminated docstring", token.start)
        return span
