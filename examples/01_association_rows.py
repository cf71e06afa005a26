"""
Example 01: Association Rows

This example shows how association rows are stored as nested maps and read
back by logical column name.
"""

from row_nest import INSTANCE, NO_PREFIX_ACCESSOR, AssociationKey


def main():
    # A person's friends: both sides of the association have an "id"
    # column, so the friend's columns carry a "friend" prefix.
    friends = AssociationKey(
        table="Person_friends",
        column_names=("id", "friend.id", "friend.name"),
        associated_entity_key_columns=("friend.id",),
        owner_key_columns=("id",),
        owner_key_values=(1,),
    )

    for values in [(1, 2, "Bob"), (1, 3, "Carl")]:
        row = INSTANCE.create_row(friends, values)
        print(f"Stored:  {row.row}")
        print(f"Logical: {row.to_dict()}")

    # Single-column rows stay a one-entry map, even for dotted names
    single = INSTANCE.build_row(["address.city"], ["Springfield"])
    print(f"\nSingle column row: {single}")
    print(f"Columns: {NO_PREFIX_ACCESSOR.get_column_names(single)}")

    # Multi-column rows are nested
    nested = INSTANCE.build_row(
        ["id", "address.city", "address.zip"], [7, "Springfield", "12345"]
    )
    print(f"\nNested row: {nested}")
    print(f"Columns: {sorted(NO_PREFIX_ACCESSOR.get_column_names(nested))}")
    print(f"address.city = {NO_PREFIX_ACCESSOR.get(nested, 'address.city')}")
    print(f"address.street = {NO_PREFIX_ACCESSOR.get(nested, 'address.street')}")

    # A prefixed accessor maps stored names back to logical ones
    accessor = INSTANCE.accessor_for(["owner.city"], "owner")
    stored = {"city": "X"}
    print(f"\nPrefixed columns: {accessor.get_column_names(stored)}")
    print(f"owner.city = {accessor.get(stored, 'owner.city')}")


if __name__ == "__main__":
    main()
