"""
staledocs - Find docstrings whose parameter lists drifted from the code.

Every function definition in a file is extracted, its docstring's args
section (Google or NumPy style) is parsed, and the two parameter lists are
compared by position, name and, optionally, type.

Example
-------
>>> from staledocs import check_source
>>> source = '''
... def area(width: int, height: int):
...     \"\"\"Compute an area.
...
...     Args:
...         height (int): The height.
...         width (int): The width.
...     \"\"\"
... '''
>>> bool(check_source(source))
False

Classes
-------
CheckConfig
    Run-wide flags for the checks.
RuleChecker
    Compare one signature with its docstring.
TreeSignatureExtractor
    Extract signatures from a LibCST tree.
LexerSignatureExtractor
    Extract signatures from a token scan.
DocstringParser
    Parse Google or NumPy args sections.
"""
from __future__ import annotations

__version__ = "0.1.0"

from staledocs.core import (
    DEFAULT_CONFIG,
    BatchResult,
    CheckConfig,
    CheckResult,
    ConfigError,
    ErrorResult,
    InvariantError,
    Result,
    ScanError,
    StaleDocsError,
    WorkerConfig,
    check_source,
)
from staledocs.docstrings import DocstringParser, DocstringStyle, DocumentedParam, parse_documented_params
from staledocs.rules import RuleChecker, check_signature
from staledocs.runner import RunReport, check_paths
from staledocs.signatures import (
    ExtractionStrategy,
    LexerSignatureExtractor,
    Parameter,
    Signature,
    TreeSignatureExtractor,
    extract_signatures,
)

__all__ = [
    "BatchResult",
    "CheckConfig",
    "CheckResult",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DocstringParser",
    "DocstringStyle",
    "DocumentedParam",
    "ErrorResult",
    "ExtractionStrategy",
    "InvariantError",
    "LexerSignatureExtractor",
    "Parameter",
    "Result",
    "RuleChecker",
    "RunReport",
    "ScanError",
    "Signature",
    "StaleDocsError",
    "TreeSignatureExtractor",
    "WorkerConfig",
    "__version__",
    "check_paths",
    "check_signature",
    "check_source",
    "extract_signatures",
    "parse_documented_params",
]
