"""
Tests for staledocs.core.results module.

Coverage targets:
- Result: success/failure states, boolean evaluation
- CheckResult: location formatting
- ErrorResult: error classification, raise_if_error behavior
- BatchResult: aggregation, filtering, iteration
"""
from __future__ import annotations

from pathlib import Path

import pytest

from staledocs.core.errors import InvariantError, ScanError
from staledocs.core.results import BatchResult, CheckResult, ErrorResult, Result


class TestResult:
    """Tests for the base Result class."""

    def test_successful_result(self):
        result = Result(success=True, message="All 3 functions are compliant")

        assert bool(result) is True
        assert result.is_error() is False

    def test_failed_result_is_not_an_error(self):
        """Non-compliance is a verdict, not an error."""
        result = Result(success=False, message="1 of 3 functions have stale docstrings")

        assert bool(result) is False
        assert result.is_error() is False


class TestCheckResult:
    """Tests for CheckResult."""

    def test_location_with_path(self):
        result = CheckResult(
            success=False,
            message="docstring missing",
            path=Path("pkg/mod.py"),
            function_name="f",
            line=12,
        )

        assert result.location == f"{Path('pkg/mod.py')}:12: `f`"

    def test_location_without_path(self):
        result = CheckResult(success=True, message="", function_name="g", line=3)

        assert result.location == "3: `g`"


class TestErrorResult:
    """Tests for ErrorResult."""

    def test_always_fails(self):
        result = ErrorResult(message="Cannot scan")

        assert result.success is False
        assert bool(result) is False
        assert result.is_error() is True

    def test_classification(self):
        scan = ErrorResult(message="scan", exception=ScanError("unterminated docstring", 4))
        internal = ErrorResult(message="bug", exception=InvariantError("no position"))

        assert scan.is_scan_error and not scan.is_invariant_error
        assert internal.is_invariant_error and not internal.is_scan_error

    def test_raise_if_error_reraises(self):
        error = ScanError("unbalanced brackets in parameter list")
        result = ErrorResult(message="scan", exception=error)

        with pytest.raises(ScanError) as exc_info:
            result.raise_if_error()

        assert exc_info.value is error

    def test_raise_if_error_without_exception(self):
        with pytest.raises(RuntimeError, match="no exception"):
            ErrorResult(message="no exception").raise_if_error()


class TestBatchResult:
    """Tests for BatchResult."""

    def test_aggregation(self):
        ok = Result(success=True, message="ok")
        stale = Result(success=False, message="stale")
        error = ErrorResult(message="error")
        batch = BatchResult([ok, stale, error])

        assert batch.success is False
        assert bool(batch) is False
        assert batch.succeeded == [ok]
        assert batch.failed == [stale, error]
        assert batch.errors == [error]
        assert len(batch) == 3
        assert list(batch) == [ok, stale, error]

    def test_empty_batch_succeeds(self):
        assert BatchResult()
