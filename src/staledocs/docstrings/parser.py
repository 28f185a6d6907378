"""Docstring parser for extracting the documented parameter list.

Supports the args sections of Google and NumPy docstrings. Parsing is
line oriented: entries are the lines sitting exactly at the section's base
indentation, continuation lines are indented deeper and ignored.
"""
from __future__ import annotations

import re

from staledocs.docstrings.styles import DocstringStyle, DocstringStyleType, DocumentedParam

# A newline, optional horizontal whitespace, then another newline
BLANK_LINE = re.compile(r"\n[^\S\n]*\n")


class DocstringParser:
    """Parse the parameter section of a docstring.

    Parameters
    ----------
    style : DocstringStyle | str
        Convention to parse. ``auto`` tries Google first, then NumPy, so a
        docstring that could match both resolves to the Google reading.
    break_on_empty_line : bool
        Stop reading the section at the first blank line.
    skip_variadic_params : bool
        Drop entries whose name starts with ``*``.

    Examples
    --------
    >>> parser = DocstringParser()
    >>> docstring = '''Short summary.
    ...
    ... Args:
    ...     x (int): The x coordinate.
    ...     y: The y coordinate.
    ... '''
    >>> [str(p) for p in parser.parse(docstring)]
    ['x: int', 'y']
    """

    GOOGLE_HEADER = "Args:\n"
    GOOGLE_TERMINATORS = ("Yields:\n", "Returns:\n", "Raises:\n")
    GOOGLE_OPTIONAL_SUFFIX = ", optional"

    NUMPY_HEADER = "Parameters\n"
    NUMPY_TERMINATORS = ("Returns\n",)

    def __init__(
        self,
        style: DocstringStyle | DocstringStyleType = DocstringStyle.AUTO,
        break_on_empty_line: bool = False,
        skip_variadic_params: bool = True,
    ) -> None:
        self.style = DocstringStyle(style)
        self.break_on_empty_line = break_on_empty_line
        self.skip_variadic_params = skip_variadic_params

    def parse(self, docstring: str) -> list[DocumentedParam] | None:
        """Parse the documented parameters using the configured style.

        Parameters
        ----------
        docstring : str
            The docstring text, delimiters included.

        Returns
        -------
        list[DocumentedParam] | None
            Parameters in the order they are documented, or None if the
            docstring has no args section in the configured style.
        """
        if self.style == DocstringStyle.GOOGLE:
            return self.parse_google(docstring)
        if self.style == DocstringStyle.NUMPY:
            return self.parse_numpy(docstring)

        params = self.parse_google(docstring)
        if params is None:
            params = self.parse_numpy(docstring)
        return params

    def detect_style(self, docstring: str) -> DocstringStyle | None:
        """Return the convention whose args section this docstring has.

        Google wins when both headers are present.
        """
        if self.parse_google(docstring) is not None:
            return DocstringStyle.GOOGLE
        if self.parse_numpy(docstring) is not None:
            return DocstringStyle.NUMPY
        return None

    def parse_google(self, docstring: str) -> list[DocumentedParam] | None:
        """Parse a Google-style ``Args:`` section."""
        _, header, section = docstring.partition(self.GOOGLE_HEADER)
        if not header:
            return None

        lines = self._section_lines(section, self.GOOGLE_TERMINATORS)
        if not lines:
            return None

        indentation = _indentation(lines[0])
        params: list[DocumentedParam] = []

        for line in lines:
            if not _is_entry(line, indentation):
                continue

            arg, colon, _ = line.partition(":")
            if not colon:
                # Stray text at entry level, not a parameter
                continue

            arg = arg.strip()
            if self.skip_variadic_params and arg.startswith("*"):
                continue

            name, space, type_text = arg.partition(" ")
            if not space:
                params.append(DocumentedParam(name))
                continue

            type_text = type_text.strip().removeprefix("(").removesuffix(")")
            type_text = type_text.removesuffix(self.GOOGLE_OPTIONAL_SUFFIX)
            params.append(DocumentedParam(name, type_text))

        return params

    def parse_numpy(self, docstring: str) -> list[DocumentedParam] | None:
        """Parse a NumPy-style ``Parameters`` section."""
        _, header, section = docstring.partition(self.NUMPY_HEADER)
        if not header:
            return None

        lines = self._section_lines(section, self.NUMPY_TERMINATORS)
        # lines[0] is the underline
        if len(lines) < 2:
            return None

        indentation = _indentation(lines[1])
        params: list[DocumentedParam] = []

        for line in lines[1:]:
            if not _is_entry(line, indentation):
                continue
            if not line.strip().rstrip("'\""):
                # Closing quotes of the docstring
                continue

            arg, colon, type_text = line.partition(":")
            name = arg.strip()
            if self.skip_variadic_params and name.startswith("*"):
                continue

            params.append(DocumentedParam(name, type_text.strip() if colon else None))

        return params

    def _section_lines(self, section: str, terminators: tuple[str, ...]) -> list[str]:
        """Cut the section at its first terminator and split it into lines."""
        section = section[:_first_index(section, terminators)]
        if self.break_on_empty_line:
            match = BLANK_LINE.search(section)
            if match:
                section = section[:match.start()]
        return section.splitlines()


def _first_index(text: str, needles: tuple[str, ...]) -> int:
    """Index of the earliest needle in text, or len(text) if none occur."""
    found = [i for i in (text.find(n) for n in needles) if i != -1]
    return min(found, default=len(text))


def _indentation(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_entry(line: str, indentation: int) -> bool:
    """True if the line starts a new entry at exactly ``indentation``."""
    return len(line) > indentation and _indentation(line) == indentation


def parse_documented_params(
    docstring: str,
    style: DocstringStyle | DocstringStyleType = DocstringStyle.AUTO,
    break_on_empty_line: bool = False,
    skip_variadic_params: bool = True,
) -> list[DocumentedParam] | None:
    """Parse the documented parameter list of a docstring.

    Parameters
    ----------
    docstring : str
        The docstring text, delimiters included.
    style : DocstringStyle | str
        ``google``, ``numpy`` or ``auto``.
    break_on_empty_line : bool
        Stop reading the section at the first blank line.
    skip_variadic_params : bool
        Drop ``*args``/``**kwargs`` entries.

    Returns
    -------
    list[DocumentedParam] | None
        The documented parameters in order, or None without an args section.
    """
    parser = DocstringParser(style, break_on_empty_line, skip_variadic_params)
    return parser.parse(docstring)
