"""Row shape enumeration."""

from __future__ import annotations

from enum import Enum


class RowShape(Enum):
    """How an association row is materialised."""

    SINGLE_COLUMN = "single_column"
    NESTED = "nested"
