"""Association row - one edge of a many-valued relationship."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from row_nest.core.config import AssociationKey
from row_nest.mapping.protocol import RowAccessor


class AssociationRow:
    """A row structure bound to its association key and accessor.

    Owner key columns are answered from the association key; every other
    read goes through the accessor. The underlying structure is exposed
    only as ``row`` for handing to the store.
    """

    __slots__ = ("_key", "_row", "_accessor", "_owner_key")

    def __init__(self, key: AssociationKey, row: Mapping[str, Any], accessor: RowAccessor) -> None:
        self._key = key
        self._row = row
        self._accessor = accessor
        self._owner_key = key.owner_key()

    @property
    def key(self) -> AssociationKey:
        return self._key

    @property
    def row(self) -> Mapping[str, Any]:
        return self._row

    @property
    def accessor(self) -> RowAccessor:
        return self._accessor

    @property
    def column_names(self) -> frozenset[str]:
        names = self._accessor.get_column_names(self._row)
        names.update(self._owner_key)
        return frozenset(names)

    def get(self, column: str) -> Any | None:
        """Value of a logical column, or None if absent."""
        if column in self._owner_key:
            return self._owner_key[column]
        return self._accessor.get(self._row, column)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of logical column name -> value."""
        return {column: self.get(column) for column in self.column_names}

    def __contains__(self, column: object) -> bool:
        return isinstance(column, str) and column in self.column_names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssociationRow):
            return NotImplemented
        return self._key == other._key and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AssociationRow(table={self._key.table!r}, columns={self.to_dict()!r})"
