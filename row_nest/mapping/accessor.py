"""Map-based row accessor.

Reads association rows stored as nested maps. Stored rows keep bare
(unprefixed) paths; the prefix exists only at the logical level, to tell
apart the two sides of an association whose column names would collide.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from row_nest.core.config import AccessorConfig
from row_nest.core.paths import flatten, get_value_or_null


def _add_column_names(row: Mapping[str, Any], column_names: set[str], prefix_path: str) -> None:
    """Add every leaf path below row to column_names."""
    for field, value in row.items():
        path = flatten(prefix_path, field)
        if isinstance(value, Mapping):
            _add_column_names(value, column_names, path)
        else:
            column_names.add(path)


class MapRowAccessor:
    """Row accessor over nested map structures.

    One algorithm parameterised by an AccessorConfig. With the default
    config there is no prefix and the accessor is stateless; use the
    shared NO_PREFIX_ACCESSOR for that case.

    Args:
        config: Prefix configuration. Defaults to the unprefixed config.
    """

    __slots__ = ("_config", "_prefixed_columns")

    def __init__(self, config: AccessorConfig | None = None) -> None:
        self._config = config if config is not None else AccessorConfig()
        self._prefixed_columns = self._config.prefixed_columns

    @property
    def config(self) -> AccessorConfig:
        return self._config

    @property
    def prefix(self) -> str | None:
        return self._config.prefix

    @property
    def prefixed_columns(self) -> tuple[str, ...]:
        return self._prefixed_columns

    def unprefix(self, prefixed_column: str) -> str:
        """Strip the prefix and its separator from a column name.

        Without a prefix the column is returned unchanged.
        """
        prefix = self._config.prefix
        if prefix is None:
            return prefixed_column
        return prefixed_column[len(prefix) + 1 :]

    def get_column_names(self, row: Mapping[str, Any]) -> set[str]:
        """Return the logical column names of a row.

        Leaf paths are collected by recursive descent; stored names of
        prefixed columns are replaced by their prefixed form.
        """
        column_names: set[str] = set()
        _add_column_names(row, column_names, "")
        for prefixed_column in self._prefixed_columns:
            unprefixed_column = self.unprefix(prefixed_column)
            if unprefixed_column in column_names:
                column_names.remove(unprefixed_column)
                column_names.add(prefixed_column)
        return column_names

    def get(self, row: Mapping[str, Any], column: str) -> Any | None:
        """Return the value of a logical column, or None if absent.

        A direct key hit wins over dotted-path descent, so rows stored with
        a literal dotted key (single-column rows) resolve too.
        """
        if column in self._prefixed_columns:
            column = self.unprefix(column)

        if column in row:
            return row[column]

        return get_value_or_null(row, column)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapRowAccessor):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def __repr__(self) -> str:
        return (
            f"MapRowAccessor(prefix={self.prefix!r}, "
            f"prefixed_columns={list(self._prefixed_columns)!r})"
        )


NO_PREFIX_ACCESSOR = MapRowAccessor()
