"""Run configuration for docstring checks.

A ``CheckConfig`` is built once per run and passed by reference into every
extraction and comparison; it is frozen so no check can alter it. Thread
pool settings live in a separate ``WorkerConfig`` owned by the runner.
"""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from staledocs.core.errors import ConfigError
from staledocs.docstrings.styles import DocstringStyle
from staledocs.signatures.base import ExtractionStrategy

PYPROJECT_TABLE = "staledocs"


@dataclass(frozen=True)
class CheckConfig:
    """Flags controlling how signatures are compared against docstrings.

    Attributes
    ----------
    break_on_empty_line : bool
        Stop reading the args section at the first blank line.
    succeed_if_no_docstring : bool
        Treat functions without a docstring as compliant.
    succeed_if_no_args_section : bool
        Treat docstrings without a parseable args section as compliant.
    succeed_if_docstring_untyped : bool
        Tolerate a type present on only one side (code or docstring).
    skip_variadic_params : bool
        Drop ``*args``/``**kwargs`` style parameters from both sides.
    docstring_style : DocstringStyle
        Docstring convention to parse, or ``auto`` to try Google then NumPy.
    strategy : ExtractionStrategy
        Signature extraction strategy, ``tree`` (LibCST) or ``lexer``.
    """

    break_on_empty_line: bool = False
    succeed_if_no_docstring: bool = True
    succeed_if_no_args_section: bool = True
    succeed_if_docstring_untyped: bool = True
    skip_variadic_params: bool = True
    docstring_style: DocstringStyle = DocstringStyle.AUTO
    strategy: ExtractionStrategy = ExtractionStrategy.TREE

    def __post_init__(self) -> None:
        # Accept plain strings for the enum fields
        try:
            object.__setattr__(self, "docstring_style", DocstringStyle(self.docstring_style))
            object.__setattr__(self, "strategy", ExtractionStrategy(self.strategy))
        except ValueError as e:
            raise ConfigError(str(e)) from None

    def with_changes(self, **overrides: Any) -> CheckConfig:
        """Return a copy of this config with some fields replaced."""
        unknown = set(overrides) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return replace(self, **overrides)

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> CheckConfig:
        """Build a config from a mapping, accepting dashed or underscored keys.

        Parameters
        ----------
        values : dict[str, Any]
            Configuration values, e.g. the ``[tool.staledocs]`` table.

        Returns
        -------
        CheckConfig
            The config with the given values over the defaults.

        Raises
        ------
        ConfigError
            If a key is unknown or a value has the wrong type.
        """
        known = {f.name: f for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigError(f"Unknown configuration key: {key!r}")
            if known[name].type == "bool" and not isinstance(value, bool):
                raise ConfigError(f"Configuration key {key!r} must be a boolean")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_pyproject(cls, path: Path) -> CheckConfig:
        """Load the ``[tool.staledocs]`` table from a pyproject.toml file.

        A missing table yields the default configuration.

        Raises
        ------
        ConfigError
            If the file is not valid TOML or the table is invalid.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        table = data.get("tool", {}).get(PYPROJECT_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TABLE}] in {path} must be a table")
        return cls.from_mapping(table)


@dataclass(frozen=True)
class WorkerConfig:
    """Thread pool settings for checking many files.

    Attributes
    ----------
    max_workers : int | None
        Number of worker threads; None lets the executor choose.
    thread_name_prefix : str
        Prefix for worker thread names, visible in debug logs.
    """

    max_workers: int | None = None
    thread_name_prefix: str = "staledocs"

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError("max_workers must be at least 1")


DEFAULT_CONFIG = CheckConfig()
