"""
Core module.

Example
-------
>>> from staledocs.core import CheckConfig, check_source
>>>
>>> config = CheckConfig(succeed_if_no_docstring=False)
>>> result = check_source("def f(x):\\n    pass\\n", config=config)
>>> bool(result)
False
"""
from __future__ import annotations

from .checker import check_source
from .config import DEFAULT_CONFIG, CheckConfig, WorkerConfig
from .errors import ConfigError, InvariantError, ScanError, StaleDocsError
from .position import LineIndex, Span
from .results import BatchResult, CheckResult, ErrorResult, Result

__all__ = [
    "BatchResult",
    "CheckConfig",
    "CheckResult",
    "ConfigError",
    "DEFAULT_CONFIG",
    "ErrorResult",
    "InvariantError",
    "LineIndex",
    "Result",
    "ScanError",
    "Span",
    "StaleDocsError",
    "WorkerConfig",
    "check_source",
]
