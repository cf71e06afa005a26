"""Association row factory for map-based document stores.

Materialises association rows as nested maps and pairs each row with the
accessor that understands its prefix configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from row_nest.core.config import AccessorConfig, AssociationKey
from row_nest.core.enums import RowShape
from row_nest.core.exceptions import PathConflictError, RowShapeError
from row_nest.core.paths import unflatten
from row_nest.mapping.accessor import NO_PREFIX_ACCESSOR, MapRowAccessor
from row_nest.mapping.row import AssociationRow

logger = logging.getLogger(__name__)


class MapAssociationRowFactory:
    """Builds association rows as nested maps.

    Rows with a single column skip nested construction and are stored as
    a one-entry map keyed by the (possibly dotted) column name.
    """

    @staticmethod
    def row_shape(columns: Sequence[str]) -> RowShape:
        """Decide how a row with these columns is materialised."""
        return RowShape.SINGLE_COLUMN if len(columns) == 1 else RowShape.NESTED

    def build_row(self, columns: Sequence[str], values: Sequence[Any]) -> dict[str, Any]:
        """Materialise one association row.

        Args:
            columns: Stored column names, possibly dotted.
            values: Values aligned with columns.

        Raises:
            RowShapeError: If columns and values differ in length.
            PathConflictError: If a column repeats or two columns need
                incompatible nesting.
        """
        if len(columns) != len(values):
            raise RowShapeError(len(columns), len(values))

        seen: set[str] = set()
        for column in columns:
            if column in seen:
                raise PathConflictError(column, column)
            seen.add(column)

        if self.row_shape(columns) is RowShape.SINGLE_COLUMN:
            return {columns[0]: values[0]}

        return unflatten(dict(zip(columns, values, strict=True)))

    def accessor_for(
        self,
        prefixed_columns: Sequence[str] | None,
        prefix: str | None,
    ) -> MapRowAccessor:
        """Return the accessor for rows with the given prefix configuration.

        Unprefixed rows share NO_PREFIX_ACCESSOR; a prefix gets its own
        accessor bound to that prefix and its columns.
        """
        if prefix is None:
            return NO_PREFIX_ACCESSOR
        logger.debug("Creating row accessor for prefix '%s' (%s)", prefix, prefixed_columns)
        return MapRowAccessor(AccessorConfig.of(prefixed_columns, prefix))

    def create_row(self, key: AssociationKey, values: Sequence[Any]) -> AssociationRow:
        """Build a row for an association from values aligned with its columns.

        Owner key columns are left out of the stored structure, since the
        row lives inside the owner's document. Prefixed columns are stored
        under their bare path; the accessor maps them back on read.

        Raises:
            RowShapeError: If values are not aligned with key.column_names.
            PathConflictError: If a prefixed column is stored under the same
                path as another column.
        """
        if len(key.column_names) != len(values):
            raise RowShapeError(len(key.column_names), len(values))

        accessor = self._accessor_for_key(key)
        prefixed = set(accessor.prefixed_columns)
        owner_columns = set(key.owner_key_columns)
        stored_columns: list[str] = []
        stored_values: list[Any] = []
        for column, value in zip(key.column_names, values, strict=True):
            if column in owner_columns:
                continue
            stored = accessor.unprefix(column) if column in prefixed else column
            if stored in stored_columns:
                raise PathConflictError(column, stored)
            stored_columns.append(stored)
            stored_values.append(value)

        logger.debug(
            "Building %s row for '%s' with columns %s",
            self.row_shape(stored_columns).value,
            key.table,
            stored_columns,
        )
        row = self.build_row(stored_columns, stored_values)
        return AssociationRow(key, row, accessor)

    def wrap_row(self, key: AssociationKey, row: Mapping[str, Any]) -> AssociationRow:
        """Bind a row structure read back from the store to its accessor."""
        return AssociationRow(key, row, self._accessor_for_key(key))

    def _accessor_for_key(self, key: AssociationKey) -> MapRowAccessor:
        config = key.accessor_config()
        return self.accessor_for(config.prefixed_columns, config.prefix)


INSTANCE = MapAssociationRowFactory()
