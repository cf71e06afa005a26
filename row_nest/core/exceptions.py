"""RowNest exception hierarchy.

Missing columns are not errors: lookups return None instead.
"""

from __future__ import annotations


class RowNestError(Exception):
    """Base exception for all RowNest errors."""


# --- Row construction ---


class RowConstructionError(RowNestError):
    """Base for errors raised while materialising a row structure."""


class RowShapeError(RowConstructionError, ValueError):
    """Raised when column names and values are not aligned."""

    def __init__(self, column_count: int, value_count: int) -> None:
        self.column_count = column_count
        self.value_count = value_count
        super().__init__(
            f"Row has {column_count} column names but {value_count} values"
        )


class PathConflictError(RowConstructionError, ValueError):
    """Raised when a dotted path runs through a scalar or onto a nested map."""

    def __init__(self, column: str, conflicting_path: str) -> None:
        self.column = column
        self.conflicting_path = conflicting_path
        super().__init__(
            f"Cannot store column '{column}': '{conflicting_path}' is already "
            "used with a different nesting"
        )


# --- Configuration ---


class ConfigError(RowNestError):
    """Raised when accessor or association key configuration is invalid."""
