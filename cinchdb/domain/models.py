"""
Domain models for the CinchDB client.

A remote database is a single table with a fixed schema of ten untyped string
columns plus a server-assigned identifier. These models carry rows, filter
predicates, assignments and ordering between callers, the query objects and
the request builder.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from cinchdb.domain.enums import COLUMN_COUNT, Column, Evaluator, OrderType

DEFAULT_COLUMN_HEADERS: List[str] = [f"Column {i}" for i in range(1, COLUMN_COUNT + 1)]


class Record(BaseModel):
    """
    One row: exactly ten optional string columns and an optional identifier.

    An empty `record_id` means the record has not been persisted yet; saving it
    routes to an insert, otherwise to update-by-id.
    """

    columns: List[Optional[str]] = Field(
        default_factory=lambda: [None] * COLUMN_COUNT,
        description="Column values, always padded or truncated to ten slots.",
    )
    record_id: str = Field("", description="Server-assigned identifier, empty when new.")

    model_config = {
        "validate_assignment": True,
    }

    @field_validator("columns", mode="before")
    @classmethod
    def _fit_schema(cls, value: Any) -> List[Optional[str]]:
        values = list(value or [])[:COLUMN_COUNT]
        return values + [None] * (COLUMN_COUNT - len(values))

    @classmethod
    def from_values(cls, *values: Optional[str]) -> "Record":
        """
        Build a record from positional column values.

        Values beyond the tenth are ignored, except that exactly eleven values
        are read as a server row whose last field is the identifier.
        """
        record_id = values[COLUMN_COUNT] if len(values) == COLUMN_COUNT + 1 else ""
        return cls(columns=list(values[:COLUMN_COUNT]), record_id=record_id or "")

    @property
    def is_new(self) -> bool:
        return not self.record_id

    def get(self, column: Column) -> Optional[str]:
        return self.columns[column.index]

    def set(self, column: Column, value: Optional[str]) -> None:
        columns = list(self.columns)
        columns[column.index] = value
        self.columns = columns


class Condition(BaseModel):
    """A single AND-combined filter predicate: `column evaluator value`."""

    column: Column
    evaluator: Evaluator
    value: str

    model_config = {"frozen": True}


class ColumnValue(BaseModel):
    """Assignment of a new value to one column, used by conditional updates."""

    column: Column
    value: str

    model_config = {"frozen": True}


class DataOrder(BaseModel):
    """Sort specification for retrievals; ignored when `order_type` is NONE."""

    order_type: OrderType = OrderType.NONE
    primary_column: Column = Column.NONE
    secondary_column: Column = Column.NONE

    model_config = {"frozen": True}

    @property
    def is_ordered(self) -> bool:
        return self.order_type is not OrderType.NONE


class Database(BaseModel):
    """
    Handle on one remote database.

    The key both identifies and authorizes access. Headers and the visible
    column count only affect how records are displayed.
    """

    key: str = Field(..., description="Opaque database key.")
    column_headers: List[str] = Field(default_factory=lambda: list(DEFAULT_COLUMN_HEADERS))
    visible_columns: int = Field(5, ge=1, le=COLUMN_COUNT)

    model_config = {"frozen": True}

    @field_validator("key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        return value.strip()

    @field_validator("column_headers", mode="before")
    @classmethod
    def _fit_headers(cls, value: Any) -> List[str]:
        headers = [str(h) for h in list(value or [])[:COLUMN_COUNT]]
        return headers + DEFAULT_COLUMN_HEADERS[len(headers) :]

    def header(self, column: Column) -> str:
        return self.column_headers[column.index]


__all__ = [
    "DEFAULT_COLUMN_HEADERS",
    "Record",
    "Condition",
    "ColumnValue",
    "DataOrder",
    "Database",
]
