"""Command-line interface for staledocs.

Checks that the args section of every docstring matches the signature it
documents. Diagnostics go to stderr through ``logging``.

Exit codes:
    0: Every function is compliant
    1: A function is non-compliant or a file could not be checked
    2: Invalid usage or configuration
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from staledocs import __version__
from staledocs.core.config import CheckConfig, WorkerConfig
from staledocs.core.errors import ConfigError
from staledocs.docstrings.styles import DocstringStyle
from staledocs.runner import DEFAULT_GLOB, check_paths
from staledocs.signatures.base import ExtractionStrategy

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

PYPROJECT = "pyproject.toml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staledocs",
        description="Check that docstring parameter sections match function signatures.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        default=[Path(".")],
        help="Files or directories to check (default: current directory)",
    )
    parser.add_argument(
        "--glob",
        default=DEFAULT_GLOB,
        help=f"Pattern used to find files inside directories (default: {DEFAULT_GLOB})",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ExtractionStrategy],
        help="Signature extraction strategy (default: tree)",
    )
    parser.add_argument(
        "--docstring-style",
        choices=[s.value for s in DocstringStyle],
        help="Docstring convention to parse (default: auto)",
    )
    parser.add_argument(
        "--break-on-empty-line",
        action="store_true",
        default=None,
        help="Stop reading the args section at the first blank line",
    )
    parser.add_argument(
        "--forbid-no-docstring",
        action="store_true",
        default=None,
        help="Fail functions that have no docstring",
    )
    parser.add_argument(
        "--forbid-no-args-in-docstring",
        action="store_true",
        default=None,
        help="Fail docstrings that have no args section",
    )
    parser.add_argument(
        "--forbid-untyped-docstrings",
        action="store_true",
        default=None,
        help="Require types to be present on both sides or neither",
    )
    parser.add_argument(
        "--allow-variadics",
        action="store_true",
        default=None,
        help="Check *args and **kwargs like other parameters",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Read [tool.staledocs] from this file (default: ./{PYPROJECT} if present)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Number of worker threads",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Suppress diagnostics")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr as bare messages."""
    level = logging.DEBUG if verbose else logging.CRITICAL if quiet else logging.INFO
    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(level)


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map the flags given on the command line to config fields."""
    inverted = {
        "forbid_no_docstring": "succeed_if_no_docstring",
        "forbid_no_args_in_docstring": "succeed_if_no_args_section",
        "forbid_untyped_docstrings": "succeed_if_docstring_untyped",
        "allow_variadics": "skip_variadic_params",
    }

    overrides: dict[str, Any] = {}
    if args.strategy is not None:
        overrides["strategy"] = args.strategy
    if args.docstring_style is not None:
        overrides["docstring_style"] = args.docstring_style
    if args.break_on_empty_line:
        overrides["break_on_empty_line"] = True
    for flag, name in inverted.items():
        if getattr(args, flag):
            overrides[name] = False
    return overrides


def load_config(args: argparse.Namespace) -> CheckConfig:
    """Layer defaults, the pyproject table and command-line flags.

    Raises
    ------
    ConfigError
        If the config file is missing or invalid.
    """
    path = args.config
    if path is not None and not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    if path is None and Path(PYPROJECT).is_file():
        path = Path(PYPROJECT)

    config = CheckConfig.from_pyproject(path) if path is not None else CheckConfig()
    logger.debug("configuration from %s", path or "defaults")
    return config.with_changes(**cli_overrides(args))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool.

    Parameters
    ----------
    argv : Sequence[str] | None
        Arguments without the program name; defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = load_config(args)
        workers = WorkerConfig(max_workers=args.jobs)
    except ConfigError as e:
        print(f"staledocs: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    missing = [p for p in args.paths if not p.exists()]
    if missing:
        print(f"staledocs: error: no such file or directory: {missing[0]}", file=sys.stderr)
        return EXIT_USAGE

    report = check_paths(args.paths, config, workers, args.glob)
    logger.debug(
        "%d files, %d functions, %d errors",
        len(report),
        report.function_count,
        report.error_count,
    )
    return EXIT_OK if report else EXIT_FAILURE
