"""
Shared pytest fixtures for the staledocs test suite.

This module provides:
- Sample source files with compliant and stale docstrings
- Sample Google and NumPy docstrings
- Temporary project directories for runner and CLI tests

Fixture Naming Convention:
- tmp_* : Fixtures that create temporary directories/files
- sample_* : Fixtures that provide sample content strings
"""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


# =============================================================================
# Sample Docstring Fixtures
# =============================================================================

@pytest.fixture
def sample_google_docstring() -> str:
    """A Google docstring with one typed and one untyped argument."""
    return textwrap.dedent('''\
        """Hey.

        Args:
            x (int): First var.
            y: Second var.
        """''')


@pytest.fixture
def sample_numpy_docstring() -> str:
    """A NumPy docstring whose section ends at a Returns header."""
    return textwrap.dedent('''\
        """Hey.

        Parameters
        ----------
        x: int
            First var.
        y
            Second var.

        Returns
        -------
        int
            The result.
        """''')


# =============================================================================
# Sample Source Fixtures
# =============================================================================

@pytest.fixture
def sample_compliant_code() -> str:
    """
    A module where every function matches its docstring.

    Contains:
    - A Google style function with types on both sides
    - A NumPy style method (``self`` is not a parameter)
    - A function without a docstring
    - A docstring without an args section
    """
    return textwrap.dedent('''\
        """Module docstring."""


        def add(x: int, y: int) -> int:
            """Add two numbers.

            Args:
                x (int): The first number.
                y (int): The second number.

            Returns:
                The sum.
            """
            return x + y


        class Calculator:
            def scale(self, value: float, factor):
                """Scale a value.

                Parameters
                ----------
                value: float
                    The value.
                factor
                    The factor.
                """
                return value * factor


        def helper(a, b):
            return a or b


        def other(x, y, z):
            """This is just a throw-away string!"""
            return x + y + 2 * z
        ''')


@pytest.fixture
def sample_stale_code() -> str:
    """A module with one function whose docstring lists parameters out of order."""
    return textwrap.dedent('''\
        def ok(x):
            """Fine.

            Args:
                x: The x.
            """


        def swapped(x: int, y: str):
            """Stale.

            Args:
                y (str): The y.
                x (int): The x.
            """
        ''')


@pytest.fixture
def sample_nested_code() -> str:
    """An outer function containing a nested function with a wrong type."""
    return textwrap.dedent('''\
        def add(x: int, y):
            """This is a docstring."""
            def sub(x: int, y: int):
                """This is a nested docstring.

                Args:
                    x (int): Haha.
                    y (str): Should error!
                """
                return x - y
            return x + y
        ''')


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================

@pytest.fixture
def tmp_project(tmp_path: Path, sample_compliant_code: str, sample_stale_code: str) -> Path:
    """
    Create a small project tree.

    Structure:
        tmp_path/
        ├── pkg/
        │   ├── __init__.py
        │   ├── good.py
        │   └── sub/
        │       └── bad.py
        └── notes.txt
    """
    pkg = tmp_path / "pkg"
    (pkg / "sub").mkdir(parents=True)
    (pkg / "__init__.py").write_text("")
    (pkg / "good.py").write_text(sample_compliant_code)
    (pkg / "sub" / "bad.py").write_text(sample_stale_code)
    (tmp_path / "notes.txt").write_text("def f(x):\n    pass\n")
    return tmp_path


@pytest.fixture
def tmp_good_project(tmp_path: Path, sample_compliant_code: str) -> Path:
    """A project directory where every file is compliant."""
    (tmp_path / "good.py").write_text(sample_compliant_code)
    (tmp_path / "empty.py").write_text("")
    return tmp_path
