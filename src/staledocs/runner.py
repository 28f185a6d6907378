"""Check many files concurrently.

Files are independent, so each one is read and checked on a worker
thread. The only state shared between workers is an ``ErrorCounter``.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from staledocs.core.checker import check_source
from staledocs.core.config import DEFAULT_CONFIG, CheckConfig, WorkerConfig
from staledocs.core.results import BatchResult, ErrorResult, Result

logger = logging.getLogger(__name__)

DEFAULT_GLOB = "**/*.py"


class ErrorCounter:
    """Thread-safe tally of non-compliant functions and failed files."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self, amount: int = 1) -> None:
        with self._lock:
            self._count += amount

    @property
    def count(self) -> int:
        with self._lock:
            return self._count


@dataclass
class RunReport(BatchResult):
    """Outcome of checking a set of files.

    Attributes:
        error_count: Non-compliant functions plus files that could not be checked
    """

    error_count: int = 0

    @property
    def success(self) -> bool:
        return self.error_count == 0 and all(r.success for r in self.results)

    @property
    def function_count(self) -> int:
        """Number of functions checked across all files."""
        return sum(len(r.data or []) for r in self.results)


def discover_files(paths: Iterable[Path | str], pattern: str = DEFAULT_GLOB) -> list[Path]:
    """Expand directories into the files matching ``pattern``.

    Files named explicitly are kept even if they do not match. The result
    is sorted and free of duplicates.

    Parameters
    ----------
    paths : Iterable[Path | str]
        Files and directories to check.
    pattern : str
        Glob applied inside each directory.

    Returns
    -------
    list[Path]
        Files to check.
    """
    found: set[Path] = set()
    for path in map(Path, paths):
        if path.is_dir():
            found.update(p for p in path.glob(pattern) if p.is_file())
        else:
            found.add(path)
    return sorted(found)


def check_file(path: Path, config: CheckConfig = DEFAULT_CONFIG) -> Result:
    """Read a file as UTF-8 and check it.

    Unreadable or undecodable files give an ``ErrorResult``.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s: cannot read file: %s", path, e)
        return ErrorResult(
            message=f"Cannot read {path}: {e}",
            path=path,
            exception=e,
            operation="check_file",
            target_repr=str(path),
        )
    return check_source(source, path, config)


def iter_results(
    files: list[Path],
    config: CheckConfig,
    workers: WorkerConfig,
    counter: ErrorCounter,
) -> Iterator[Result]:
    """Check files on a thread pool, yielding results in file order."""

    def work(path: Path) -> Result:
        result = check_file(path, config)
        if isinstance(result, ErrorResult):
            counter.increment()
        counter.increment(sum(1 for r in result.data or [] if not r))
        return result

    with ThreadPoolExecutor(
        max_workers=workers.max_workers,
        thread_name_prefix=workers.thread_name_prefix,
    ) as executor:
        yield from executor.map(work, files)


def check_paths(
    paths: Iterable[Path | str],
    config: CheckConfig = DEFAULT_CONFIG,
    workers: WorkerConfig | None = None,
    pattern: str = DEFAULT_GLOB,
) -> RunReport:
    """Check every Python file under the given paths.

    Parameters
    ----------
    paths : Iterable[Path | str]
        Files and directories to check.
    config : CheckConfig
        Run-wide flags shared by every worker.
    workers : WorkerConfig | None
        Thread pool settings; defaults to ``WorkerConfig()``.
    pattern : str
        Glob used to expand directories.

    Returns
    -------
    RunReport
        Per-file results and the total error count.
    """
    files = discover_files(paths, pattern)
    logger.debug("checking %d files", len(files))

    counter = ErrorCounter()
    results = list(iter_results(files, config, workers or WorkerConfig(), counter))

    # All workers have joined once the executor context exits
    return RunReport(results=results, error_count=counter.count)
