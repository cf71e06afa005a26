"""Dotted-path helpers for nested row structures.

Column names address nested maps with dot-separated paths:
    "address.city" -> row["address"]["city"]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from row_nest.core.exceptions import PathConflictError

SEPARATOR = "."


def flatten(prefix_path: str | None, field: str) -> str:
    """Join a path prefix and a field name into one dotted path."""
    if not prefix_path:
        return field
    return prefix_path + SEPARATOR + field


def get_value_or_null(row: Mapping[str, Any], dotted_path: str) -> Any | None:
    """Resolve a dotted path by descending through nested maps.

    Returns None if any segment is missing or an intermediate value is
    not a map.
    """
    current: Any = row
    for segment in dotted_path.split(SEPARATOR):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


def set_value(row: dict[str, Any], dotted_path: str, value: Any) -> None:
    """Write a value under a dotted path, creating intermediate maps.

    Raises:
        PathConflictError: If a path segment already holds a scalar.
    """
    *parents, leaf = dotted_path.split(SEPARATOR)
    current = row
    walked = ""
    for segment in parents:
        walked = flatten(walked, segment)
        child = current.setdefault(segment, {})
        if not isinstance(child, dict):
            raise PathConflictError(dotted_path, walked)
        current = child
    if isinstance(current.get(leaf), dict):
        raise PathConflictError(dotted_path, flatten(walked, leaf))
    current[leaf] = value


def unflatten(columns: Mapping[str, Any]) -> dict[str, Any]:
    """Build a nested row structure from flat column -> value pairs."""
    row: dict[str, Any] = {}
    for column, value in columns.items():
        set_value(row, column, value)
    return row


def flatten_row(row: Mapping[str, Any], prefix_path: str = "") -> dict[str, Any]:
    """Collapse a nested row structure into leaf path -> value pairs."""
    result: dict[str, Any] = {}
    for field, value in row.items():
        path = flatten(prefix_path, field)
        if isinstance(value, Mapping):
            result.update(flatten_row(value, path))
        else:
            result[path] = value
    return result


def shared_prefix(columns: Iterable[str]) -> str | None:
    """Leading path segment shared by all columns, or None.

    Every column must be dotted and start with the same segment;
    otherwise (or for no columns at all) there is no shared prefix.
    """
    prefix: str | None = None
    for column in columns:
        head, sep, _ = column.partition(SEPARATOR)
        if not sep:
            return None
        if prefix is None:
            prefix = head
        elif head != prefix:
            return None
    return prefix
