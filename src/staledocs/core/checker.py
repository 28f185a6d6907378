"""Check every function of one source file.

The orchestrator picks the configured extraction strategy, feeds each
signature to the rule engine and logs a diagnostic per non-compliant
function. Structural and invariant failures are returned as
``ErrorResult`` rather than raised, so one bad file never stops a run.
"""
from __future__ import annotations

import logging
from pathlib import Path

from staledocs.core.config import DEFAULT_CONFIG, CheckConfig
from staledocs.core.errors import InvariantError, ScanError
from staledocs.core.position import LineIndex
from staledocs.core.results import CheckResult, ErrorResult, Result
from staledocs.rules.checker import RuleChecker
from staledocs.signatures.base import get_extractor

logger = logging.getLogger(__name__)


def check_source(
    source: str,
    path: Path | None = None,
    config: CheckConfig = DEFAULT_CONFIG,
) -> Result:
    """Check every function definition in a source file.

    Parameters
    ----------
    source : str
        The whole file text.
    path : Path | None
        Used only to label diagnostics.
    config : CheckConfig
        Run-wide flags, including the extraction strategy.

    Returns
    -------
    Result
        Truthy when every function is compliant. ``data`` holds the
        ``CheckResult`` of each function in source order. An
        ``ErrorResult`` is returned if the file could not be scanned.
    """
    extractor = get_extractor(config.strategy, config.skip_variadic_params)
    checker = RuleChecker(config)
    results: list[CheckResult] = []

    try:
        for signature in extractor.extract(source):
            result = checker.check(signature)
            result.path = path
            results.append(result)
            if not result:
                logger.error("%s: %s", result.location, result.message)
    except ScanError as e:
        logger.error("scan error: %s", _describe(e, path, source))
        return ErrorResult(
            message=f"Cannot scan {path or 'source'}: {e}",
            path=path,
            exception=e,
            operation="check_source",
            target_repr=str(path) if path is not None else "<source>",
            data=results,
        )
    except InvariantError as e:
        logger.critical("internal error: %s", _describe(e, path, source))
        return ErrorResult(
            message=f"Internal error while checking {path or 'source'}: {e}",
            path=path,
            exception=e,
            operation="check_source",
            target_repr=str(path) if path is not None else "<source>",
            data=results,
        )

    failed = sum(1 for r in results if not r)
    logger.debug("%s checked %d functions, %d non-compliant", path or "<source>", len(results), failed)

    if failed:
        return Result(
            success=False,
            message=f"{failed} of {len(results)} functions have stale docstrings",
            path=path,
            data=results,
        )
    return Result(
        success=True,
        message=f"All {len(results)} functions are compliant",
        path=path,
        data=results,
    )


def _describe(error: Exception, path: Path | None, source: str) -> str:
    """Prefix an error with its file and, when known, its line."""
    parts = [str(path)] if path is not None else []
    offset = getattr(error, "offset", None)
    if offset is not None:
        parts.append(str(LineIndex(source).line_of(offset)))
    parts.append(f" {error}" if parts else str(error))
    return ":".join(parts)
