"""Unit tests for AssociationRow."""

from __future__ import annotations

from row_nest.core.config import AssociationKey
from row_nest.mapping.accessor import NO_PREFIX_ACCESSOR, MapRowAccessor
from row_nest.mapping.factory import MapAssociationRowFactory
from row_nest.mapping.row import AssociationRow


class TestAssociationRow:
    def test_reads_through_accessor(self, owner_accessor: MapRowAccessor) -> None:
        key = AssociationKey(table="t", column_names=("owner.city",))
        row = AssociationRow(key, {"city": "X"}, owner_accessor)
        assert row.column_names == {"owner.city"}
        assert row.get("owner.city") == "X"

    def test_owner_key_from_association_key(self) -> None:
        key = AssociationKey(
            table="t",
            column_names=("owner_id", "item"),
            owner_key_columns=("owner_id",),
            owner_key_values=(5,),
        )
        row = AssociationRow(key, {"item": "a"}, NO_PREFIX_ACCESSOR)
        assert row.get("owner_id") == 5
        assert row.column_names == {"owner_id", "item"}

    def test_missing_column(self) -> None:
        key = AssociationKey(table="t", column_names=("item",))
        row = AssociationRow(key, {}, NO_PREFIX_ACCESSOR)
        assert row.get("item") is None
        assert row.column_names == frozenset()
        assert row.to_dict() == {}

    def test_contains(self, friends_key: AssociationKey, factory: MapAssociationRowFactory) -> None:
        row = factory.create_row(friends_key, [1, 2, "Bob"])
        assert "friend.name" in row
        assert "name" not in row
        assert 42 not in row

    def test_equality(self, friends_key: AssociationKey, factory: MapAssociationRowFactory) -> None:
        first = factory.create_row(friends_key, [1, 2, "Bob"])
        second = factory.wrap_row(friends_key, {"id": 2, "name": "Bob"})
        third = factory.create_row(friends_key, [1, 3, "Carl"])
        assert first == second
        assert first != third

    def test_repr(self, orders_key: AssociationKey, factory: MapAssociationRowFactory) -> None:
        row = factory.create_row(orders_key, [1, 10, 0])
        assert "Customer_orders" in repr(row)
        assert "'order_id': 10" in repr(row)
