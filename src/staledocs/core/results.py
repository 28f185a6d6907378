"""Result types for checking operations.

This module defines the core result classes:
- Result - Base result for all operations
- CheckResult - Verdict for a single function signature
- ErrorResult - Result for files that could not be checked
- BatchResult - Aggregate result over many files
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from staledocs.core.errors import InvariantError, ScanError


@dataclass
class Result:
    """Base result for all operations.

    File-level operations never raise exceptions. Instead, they return
    Result objects that indicate success or failure.

    Attributes:
        success: Whether the checked code is compliant
        message: Human-readable description of what happened
        path: File the result refers to, if known
        data: Optional payload (for example the per-function results)
    """

    success: bool
    message: str
    path: Path | None = None
    data: Any = None

    def __bool__(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        """Check if this result represents an error."""
        return False


@dataclass
class CheckResult(Result):
    """Verdict of the rule engine for one function.

    Attributes:
        function_name: Name of the checked function
        line: 1-indexed line of the ``def``
    """

    function_name: str = ""
    line: int = 0

    @property
    def location(self) -> str:
        """Diagnostic prefix naming the function by path, line and name."""
        prefix = f"{self.path}:" if self.path is not None else ""
        return f"{prefix}{self.line}: `{self.function_name}`"


@dataclass
class ErrorResult(Result):
    """Result for a file that could not be checked - never raises automatically.

    Attributes:
        exception: The original exception, if any
        operation: Name of the attempted operation
        target_repr: String representation of the target
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    operation: str = ""
    target_repr: str = ""

    def is_error(self) -> bool:
        return True

    @property
    def is_scan_error(self) -> bool:
        """True if the file failed with a structural scan error."""
        return isinstance(self.exception, ScanError)

    @property
    def is_invariant_error(self) -> bool:
        """True if the failure indicates a bug rather than a bad source file."""
        return isinstance(self.exception, InvariantError)

    def raise_if_error(self) -> None:
        """Explicitly re-raise the exception if the programmer wants to."""
        if self.exception:
            raise self.exception
        raise RuntimeError(self.message)


@dataclass
class BatchResult:
    """Aggregate result for checks applied to multiple files."""

    results: list[Result] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if every file is compliant and none failed."""
        return all(r.success for r in self.results)

    @property
    def succeeded(self) -> list[Result]:
        """Results that succeeded."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[Result]:
        """Results that failed, either non-compliant or errored."""
        return [r for r in self.results if not r.success]

    @property
    def errors(self) -> list[ErrorResult]:
        """Results for files that could not be checked at all."""
        return [r for r in self.results if isinstance(r, ErrorResult)]

    def __bool__(self) -> bool:
        return self.success

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)
