"""
Tests for staledocs.runner module.

This module tests checking many files:
- discover_files() expansion and ordering
- check_file() reading failures
- check_paths() aggregation and the shared error counter
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from staledocs.core.config import CheckConfig, WorkerConfig
from staledocs.core.results import ErrorResult
from staledocs.runner import ErrorCounter, RunReport, check_file, check_paths, discover_files


class TestDiscoverFiles:
    """Tests for discover_files()."""

    def test_directories_are_globbed(self, tmp_project):
        files = discover_files([tmp_project])

        names = [p.relative_to(tmp_project).as_posix() for p in files]
        assert names == ["pkg/__init__.py", "pkg/good.py", "pkg/sub/bad.py"]

    def test_explicit_file_kept(self, tmp_project):
        notes = tmp_project / "notes.txt"

        assert discover_files([notes]) == [notes]

    def test_custom_pattern(self, tmp_project):
        files = discover_files([tmp_project], "*.txt")

        assert [p.name for p in files] == ["notes.txt"]

    def test_duplicates_removed(self, tmp_project):
        good = tmp_project / "pkg" / "good.py"

        assert discover_files([good, str(good), tmp_project / "pkg" / "good.py"]) == [good]


class TestCheckFile:
    """Tests for check_file()."""

    def test_missing_file(self, tmp_path):
        result = check_file(tmp_path / "nope.py")

        assert isinstance(result, ErrorResult)
        assert isinstance(result.exception, FileNotFoundError)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin.py"
        path.write_bytes(b"def f(x):\n    '''caf\xe9'''\n")

        result = check_file(path)

        assert isinstance(result, ErrorResult)
        assert isinstance(result.exception, UnicodeDecodeError)

    def test_reads_and_checks(self, tmp_path, sample_stale_code):
        path = tmp_path / "stale.py"
        path.write_text(sample_stale_code, encoding="utf-8")

        result = check_file(path)

        assert not result
        assert result.path == path


class TestErrorCounter:
    """Tests for ErrorCounter."""

    def test_concurrent_increments(self):
        counter = ErrorCounter()

        with ThreadPoolExecutor(max_workers=8) as executor:
            for _ in range(1000):
                executor.submit(counter.increment)

        assert counter.count == 1000

    def test_increment_by_amount(self):
        counter = ErrorCounter()
        counter.increment(3)
        counter.increment()

        assert counter.count == 4


@pytest.mark.parametrize("strategy", ["tree", "lexer"])
class TestCheckPaths:
    """Tests for check_paths()."""

    def test_project_with_stale_file(self, tmp_project, strategy):
        report = check_paths([tmp_project], CheckConfig(strategy=strategy), WorkerConfig(max_workers=2))

        assert isinstance(report, RunReport)
        assert not report
        assert len(report) == 3
        assert report.error_count == 1
        assert report.function_count == 6
        assert [r.path.name for r in report.failed] == ["bad.py"]

    def test_compliant_project(self, tmp_good_project, strategy):
        report = check_paths([tmp_good_project], CheckConfig(strategy=strategy))

        assert report
        assert report.error_count == 0

    def test_unreadable_file_counts_as_error(self, tmp_good_project, strategy):
        (tmp_good_project / "latin.py").write_bytes(b"x = '\xe9'\n")

        report = check_paths([tmp_good_project], CheckConfig(strategy=strategy))

        assert not report
        assert report.error_count == 1
        assert len(report.errors) == 1

    def test_results_in_file_order(self, tmp_project, strategy):
        report = check_paths([tmp_project], CheckConfig(strategy=strategy))

        assert [r.path for r in report] == discover_files([tmp_project])


def test_workers_use_named_threads(tmp_good_project, monkeypatch):
    """Worker threads carry the configured name prefix."""
    import staledocs.runner as runner

    names = []
    original = runner.check_file

    def recording_check_file(path, config):
        names.append(threading.current_thread().name)
        return original(path, config)

    monkeypatch.setattr(runner, "check_file", recording_check_file)

    check_paths([tmp_good_project], workers=WorkerConfig(thread_name_prefix="docs-worker"))

    assert names and all(name.startswith("docs-worker") for name in names)
