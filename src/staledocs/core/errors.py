"""Exception types raised inside the checking core.

Soft absences (no docstring, no args section) are never exceptions; they
flow through the pipeline as ``None`` and are resolved by configuration.
The classes here cover the remaining failure modes:

- ScanError - structural failure while scanning one file's source
- InvariantError - a logic error inside the core or its tree provider
- ConfigError - an invalid run configuration
"""
from __future__ import annotations


class StaleDocsError(Exception):
    """Base class for every error raised by staledocs."""


class ScanError(StaleDocsError):
    """Structural failure while scanning a source file.

    Raised for an unterminated docstring delimiter, unbalanced bracket
    nesting, or a parameter list that ends before its closing paren.
    Callers report it for the offending file and move on.

    Attributes
    ----------
    offset : int | None
        Character offset into the source where scanning stopped, when known.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class InvariantError(StaleDocsError):
    """A condition the core relies on did not hold.

    Indicates a bug in staledocs or an incompatible tree provider. It halts
    processing of the current file and is logged apart from compliance
    failures.
    """


class ConfigError(StaleDocsError):
    """Invalid configuration value or unknown configuration key."""
