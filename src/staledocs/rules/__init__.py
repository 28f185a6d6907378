"""Compliance rules for signatures and their docstrings.

This package provides:
- RuleChecker: Applies the rules with a fixed configuration
- check_signature: Check a single signature
"""
from staledocs.rules.checker import (
    ARGS_SECTION_MISSING,
    DOCSTRING_MISSING,
    RuleChecker,
    check_signature,
    format_params,
)

__all__ = [
    "ARGS_SECTION_MISSING",
    "DOCSTRING_MISSING",
    "RuleChecker",
    "check_signature",
    "format_params",
]
