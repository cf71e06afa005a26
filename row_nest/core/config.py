"""Configuration models.

AccessorConfig describes how a row accessor treats prefixed columns.
AssociationKey carries the column metadata of one association, from which
the prefix configuration of its rows is derived.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from row_nest.core.exceptions import ConfigError
from row_nest.core.paths import SEPARATOR, shared_prefix


class AccessorConfig(BaseModel):
    """Prefix configuration of a row accessor.

    The default instance (no prefix, no prefixed columns) is the
    unprefixed case.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str | None = None
    prefixed_columns: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _drop_columns_without_prefix(cls, data: Any) -> Any:
        # Prefixed columns only mean something under a prefix.
        if isinstance(data, dict) and data.get("prefix") is None and data.get("prefixed_columns"):
            data = {**data, "prefixed_columns": ()}
        return data

    @classmethod
    def of(cls, prefixed_columns: Sequence[str] | None, prefix: str | None) -> AccessorConfig:
        """Build a config, wrapping validation failures in ConfigError."""
        if isinstance(prefixed_columns, str):
            raise ConfigError(
                "prefixed_columns must be a sequence of column names, "
                f"got string '{prefixed_columns}'"
            )
        try:
            return cls(prefix=prefix, prefixed_columns=tuple(prefixed_columns or ()))
        except ValidationError as e:
            raise ConfigError(f"Invalid accessor configuration: {e}") from e


class AssociationKey(BaseModel):
    """Column metadata of one association.

    Args:
        table: Name of the association table or collection.
        column_names: Logical column names of each row, in order.
        associated_entity_key_columns: Columns holding the key of the
            entity on the other side of the association.
        owner_key_columns: Columns holding the key of the owning entity.
            Rows live inside the owner's document, so these are not
            stored in the row structure.
        owner_key_values: Values aligned with owner_key_columns.
    """

    model_config = ConfigDict(frozen=True)

    table: str
    column_names: tuple[str, ...]
    associated_entity_key_columns: tuple[str, ...] = ()
    owner_key_columns: tuple[str, ...] = ()
    owner_key_values: tuple[Any, ...] = ()

    @model_validator(mode="after")
    def _check_owner_key(self) -> AssociationKey:
        if len(self.owner_key_columns) != len(self.owner_key_values):
            raise ValueError(
                f"owner_key_columns has {len(self.owner_key_columns)} entries "
                f"but owner_key_values has {len(self.owner_key_values)}"
            )
        return self

    @classmethod
    def of(cls, **data: Any) -> AssociationKey:
        """Build a key, wrapping validation failures in ConfigError."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid association key: {e}") from e

    def prefix(self) -> str | None:
        """Prefix shared by the associated entity's key columns, if any."""
        return shared_prefix(self.associated_entity_key_columns)

    def prefixed_columns(self) -> tuple[str, ...]:
        """Row columns that live under the association prefix."""
        prefix = self.prefix()
        if prefix is None:
            return ()
        head = prefix + SEPARATOR
        return tuple(c for c in self.column_names if c.startswith(head))

    def accessor_config(self) -> AccessorConfig:
        return AccessorConfig(prefix=self.prefix(), prefixed_columns=self.prefixed_columns())

    def owner_key(self) -> dict[str, Any]:
        """Owner key column -> value."""
        return dict(zip(self.owner_key_columns, self.owner_key_values, strict=True))
