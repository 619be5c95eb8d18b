"""
Closed vocabularies used to describe CinchDB queries.

Every remote database has the same fixed schema: ten untyped string columns
plus a server-assigned record identifier. `SCHEMA` is the ordered column
descriptor; the wire tokens for columns, evaluators and sort directions live
next to the enumerations they belong to.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Column(Enum):
    """One of the ten fixed column slots. `NONE` means "no column selected"."""

    NONE = 0
    COLUMN1 = 1
    COLUMN2 = 2
    COLUMN3 = 3
    COLUMN4 = 4
    COLUMN5 = 5
    COLUMN6 = 6
    COLUMN7 = 7
    COLUMN8 = 8
    COLUMN9 = 9
    COLUMN10 = 10

    @property
    def index(self) -> int:
        """Zero-based position of the column inside `Record.columns`."""
        if self is Column.NONE:
            raise ValueError("Column.NONE has no position in a record")
        return self.value - 1

    @classmethod
    def from_token(cls, token: str) -> "Column":
        """Resolve `col1`..`col10` (case-insensitive) back to a column."""
        normalized = token.strip().lower()
        for column in SCHEMA:
            if column_token(column) == normalized:
                return column
        raise ValueError(f"Unknown column token '{token}'")


class Evaluator(Enum):
    """Comparison operator of a filter condition."""

    EQUAL_TO = "equal_to"
    NOT_EQUAL_TO = "not_equal_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    NONE = "none"


class OrderType(Enum):
    """Sort direction of a retrieval."""

    NONE = "none"
    ASCENDING = "asc"
    DESCENDING = "desc"


SCHEMA: Tuple[Column, ...] = tuple(c for c in Column if c is not Column.NONE)
COLUMN_COUNT = len(SCHEMA)

EVALUATOR_ERROR_TOKEN = "ERROR"

_EVALUATOR_TOKENS = {
    Evaluator.EQUAL_TO: "=",
    Evaluator.NOT_EQUAL_TO: "!=",
    Evaluator.GREATER_THAN: ">",
    Evaluator.GREATER_THAN_OR_EQUAL_TO: ">=",
    Evaluator.LESS_THAN: "<",
    Evaluator.LESS_THAN_OR_EQUAL_TO: "<=",
}


def column_token(column: Column) -> str:
    """
    Map a column to its wire name (`Column.COLUMN1` -> `"col1"`).

    Raises
    ------
    ValueError
        For `Column.NONE`, which must never be serialized.
    """
    if column is Column.NONE:
        raise ValueError("Column.NONE cannot be serialized")
    return f"col{column.value}"


def evaluator_token(evaluator: Evaluator) -> str:
    """Map an evaluator to its operator; `Evaluator.NONE` yields the `"ERROR"` sentinel."""
    return _EVALUATOR_TOKENS.get(evaluator, EVALUATOR_ERROR_TOKEN)


def order_prefix(order_type: OrderType) -> str:
    """Constant `"ORDER BY "` for either direction, empty for `OrderType.NONE`."""
    return "" if order_type is OrderType.NONE else "ORDER BY "


def order_direction_token(order_type: OrderType) -> str:
    """Direction suffix appended after the ordering columns."""
    if order_type is OrderType.NONE:
        return ""
    return order_type.value


__all__ = [
    "Column",
    "Evaluator",
    "OrderType",
    "SCHEMA",
    "COLUMN_COUNT",
    "EVALUATOR_ERROR_TOKEN",
    "column_token",
    "evaluator_token",
    "order_prefix",
    "order_direction_token",
]
