"""
Exceptions that are used throughout
"""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path


class MissingOptionalDependencyError(ImportError):
    """
    Raised when an optional dependency is missing

    For example, when loading the source spreadsheet but `odfpy` isn't installed
    """

    def __init__(self, callable_name: str, requirement: str) -> None:
        """
        Initialise the error

        Parameters
        ----------
        callable_name
            The name of the callable that requires the dependency

        requirement
            The name of the requirement
        """
        error_msg = f"`{callable_name}` requires {requirement} to be installed"
        super().__init__(error_msg)


class InvalidRecordError(ValueError):
    """
    Raised when the daily records can't be used as a time series

    For example, the dates are duplicated or not sorted
    """


class InvalidCountError(ValueError):
    """
    Raised when an arrival count is not a non-negative integer
    """

    def __init__(self, column: str, invalid: Collection[object]) -> None:
        """
        Initialise the error

        Parameters
        ----------
        column
            Column in which the invalid counts were found

        invalid
            The invalid values
        """
        error_msg = (
            f"{column} must only contain non-negative integers (or be missing). "
            f"Invalid values: {list(invalid)}"
        )
        super().__init__(error_msg)


class InvalidGroupingError(ValueError):
    """
    Raised when the corrected week numbers fall outside of 1 to 52

    This indicates a bug in the week correction, it should never happen.
    """


class SourceFileError(FileNotFoundError):
    """
    Raised when we can't find exactly one source file
    """

    def __init__(self, input_dir: Path, pattern: str, found: list[Path]) -> None:
        """
        Initialise the error

        Parameters
        ----------
        input_dir
            Directory that was searched

        pattern
            Pattern used for the search

        found
            Files which matched `pattern`
        """
        error_msg = (
            f"Expected exactly one file matching {pattern!r} in {input_dir}. "
            f"Found {len(found)}: {[str(v) for v in found]}"
        )
        super().__init__(error_msg)
