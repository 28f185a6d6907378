"""Data model for extracted function signatures."""
from __future__ import annotations

from dataclasses import dataclass, field

from staledocs.core.position import Span

RECEIVER_NAMES = frozenset({"self", "cls"})

# Bare markers for keyword-only and positional-only parameters
PARAMETER_MARKERS = frozenset({"*", "/"})


@dataclass(frozen=True)
class Parameter:
    """A formal parameter of a function.

    Attributes
    ----------
    name : str
        Parameter name; variadics keep their ``*``/``**`` prefix.
    annotation : str | None
        Annotation text as written in the source, or None.
    """

    name: str
    annotation: str | None = None

    @property
    def is_variadic(self) -> bool:
        return self.name.startswith("*")

    def __str__(self) -> str:
        return f"{self.name}: {self.annotation}" if self.annotation is not None else self.name


@dataclass
class Signature:
    """One function's parameter list and docstring location.

    Text is held as spans into ``source`` and resolved on access, so
    signatures never copy the file they came from.

    Attributes
    ----------
    source : str
        The whole source buffer the spans refer to.
    name_span : Span
        Span of the function name.
    line : int
        1-indexed line of the ``def`` keyword.
    params : list[Parameter]
        Parameters in declaration order, receivers excluded.
    docstring_span : Span | None
        Span of the docstring literal including delimiters, if any.
    """

    source: str = field(repr=False)
    name_span: Span
    line: int
    params: list[Parameter] = field(default_factory=list)
    docstring_span: Span | None = None

    @property
    def name(self) -> str:
        return self.name_span.resolve(self.source)

    @property
    def docstring(self) -> str | None:
        if self.docstring_span is None:
            return None
        return self.docstring_span.resolve(self.source)

    @property
    def has_docstring(self) -> bool:
        return self.docstring_span is not None


def keep_parameter(name: str, skip_variadic_params: bool) -> bool:
    """Decide whether a parameter name belongs in a signature.

    Receivers and bare ``*``/``/`` markers never do; variadics are dropped
    when ``skip_variadic_params`` is set.
    """
    if name in RECEIVER_NAMES or name in PARAMETER_MARKERS:
        return False
    return not (skip_variadic_params and name.startswith("*"))
