"""Docstring style definitions.

Supports Google and NumPy docstring styles, plus auto-detection.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


DocstringStyleType = Literal["google", "numpy", "auto"]


class DocstringStyle(str, Enum):
    """Supported docstring styles."""

    GOOGLE = "google"
    NUMPY = "numpy"
    AUTO = "auto"


@dataclass(frozen=True)
class DocumentedParam:
    """A parameter documented in a docstring's args section.

    Attributes
    ----------
    name : str
        The parameter name as written, including any ``*``/``**`` prefix.
    type_text : str | None
        The documented type after normalization, or None if untyped.
    """

    name: str
    type_text: str | None = None

    def __str__(self) -> str:
        return f"{self.name}: {self.type_text}" if self.type_text is not None else self.name
