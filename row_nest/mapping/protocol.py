"""Row accessor and row factory protocols.

Owners of association rows read them exclusively through a RowAccessor;
the row structure itself is never walked by callers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class RowAccessor(Protocol):
    """Read-only view over materialised row structures."""

    def get_column_names(self, row: Mapping[str, Any]) -> set[str]:
        """Return all logical column names present in the row."""
        ...

    def get(self, row: Mapping[str, Any], column: str) -> Any | None:
        """Return the value of one logical column, or None if absent."""
        ...


class RowFactory(Protocol):
    """Builds row structures and hands out matching accessors."""

    def build_row(self, columns: Sequence[str], values: Sequence[Any]) -> dict[str, Any]:
        """Materialise one association row."""
        ...

    def accessor_for(self, prefixed_columns: Sequence[str], prefix: str | None) -> RowAccessor:
        """Return the accessor for rows with the given prefix configuration."""
        ...
