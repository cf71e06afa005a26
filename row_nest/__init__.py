"""RowNest - association rows between dotted columns and nested maps."""

from __future__ import annotations

from row_nest.core.config import AccessorConfig, AssociationKey
from row_nest.core.enums import RowShape
from row_nest.core.exceptions import (
    ConfigError,
    PathConflictError,
    RowConstructionError,
    RowNestError,
    RowShapeError,
)
from row_nest.core.paths import (
    flatten,
    flatten_row,
    get_value_or_null,
    set_value,
    shared_prefix,
    unflatten,
)
from row_nest.mapping.accessor import NO_PREFIX_ACCESSOR, MapRowAccessor
from row_nest.mapping.factory import INSTANCE, MapAssociationRowFactory
from row_nest.mapping.row import AssociationRow

__all__ = [
    # Config
    "AccessorConfig",
    "AssociationKey",
    # Paths
    "flatten",
    "flatten_row",
    "get_value_or_null",
    "set_value",
    "shared_prefix",
    "unflatten",
    # Mapping
    "MapAssociationRowFactory",
    "INSTANCE",
    "MapRowAccessor",
    "NO_PREFIX_ACCESSOR",
    "AssociationRow",
    # Enums
    "RowShape",
    # Exceptions
    "RowNestError",
    "RowConstructionError",
    "RowShapeError",
    "PathConflictError",
    "ConfigError",
]
