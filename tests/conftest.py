"""Shared test fixtures."""

from __future__ import annotations

import pytest

from row_nest.core.config import AccessorConfig, AssociationKey
from row_nest.mapping.accessor import MapRowAccessor
from row_nest.mapping.factory import MapAssociationRowFactory


@pytest.fixture
def factory() -> MapAssociationRowFactory:
    return MapAssociationRowFactory()


@pytest.fixture
def owner_accessor() -> MapRowAccessor:
    """Accessor for rows whose 'owner.*' columns are stored unprefixed."""
    return MapRowAccessor(
        AccessorConfig(prefix="owner", prefixed_columns=("owner.city", "owner.address.zip"))
    )


@pytest.fixture
def friends_key() -> AssociationKey:
    """Self-referencing association: both sides have an 'id' column.

    The associated side is prefixed with 'friend' to keep the columns apart.
    """
    return AssociationKey(
        table="Person_friends",
        column_names=("id", "friend.id", "friend.name"),
        associated_entity_key_columns=("friend.id",),
        owner_key_columns=("id",),
        owner_key_values=(1,),
    )


@pytest.fixture
def orders_key() -> AssociationKey:
    """Plain association whose associated key columns share no prefix."""
    return AssociationKey(
        table="Customer_orders",
        column_names=("customer_id", "order_id", "position"),
        associated_entity_key_columns=("order_id",),
        owner_key_columns=("customer_id",),
        owner_key_values=(1,),
    )
