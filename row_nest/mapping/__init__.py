"""Mapping layer - association rows as nested maps."""

from __future__ import annotations

from row_nest.mapping.accessor import NO_PREFIX_ACCESSOR, MapRowAccessor
from row_nest.mapping.factory import INSTANCE, MapAssociationRowFactory
from row_nest.mapping.protocol import RowAccessor, RowFactory
from row_nest.mapping.row import AssociationRow

__all__ = [
    "MapRowAccessor",
    "NO_PREFIX_ACCESSOR",
    "MapAssociationRowFactory",
    "INSTANCE",
    "AssociationRow",
    "RowAccessor",
    "RowFactory",
]
