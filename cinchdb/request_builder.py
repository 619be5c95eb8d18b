"""
Request serialization for the CinchDB HTTP API.

This module is the only place that knows the wire format: every remote
operation is a GET against a path of the form

    {base_url}/{key}/{operation}/{condition-clause}/{extra-clause}

Condition values are interpolated verbatim by default, because the deployed
service parses the raw path. With `encode_values=True` each value is
percent-encoded before interpolation while the separators the service expects
(`/`, `=`, `'`, `" AND "`) are still emitted literally.

Usage:
    builder = RequestBuilder("https://cinchdb.com")
    url = builder.retrieve(key, conditions=[...], order=DataOrder(...), limit=10)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence
from urllib.parse import quote

from cinchdb.domain.enums import (
    COLUMN_COUNT,
    Column,
    Evaluator,
    column_token,
    evaluator_token,
    order_direction_token,
    order_prefix,
)
from cinchdb.domain.models import ColumnValue, Condition, DataOrder, Record
from cinchdb.errors import QueryValidationError

DEFAULT_LIMIT = 1_000_000
CONDITION_SEPARATOR = " AND "


def _encode(value: Optional[str], encode_values: bool) -> str:
    text = value or ""
    return quote(text, safe="") if encode_values else text


def _require_column(column: Column, role: str) -> str:
    if column is Column.NONE:
        raise QueryValidationError(f"Column.NONE cannot be used as {role}")
    return column_token(column)


def condition_clause(conditions: Sequence[Condition], encode_values: bool = False) -> str:
    """
    Join conditions as `{col}{op}{value}` pairs separated by `" AND "`.

    Raises
    ------
    QueryValidationError
        If a condition uses `Column.NONE` or `Evaluator.NONE`.
    """
    parts = []
    for condition in conditions:
        if condition.evaluator is Evaluator.NONE:
            raise QueryValidationError(
                f"Evaluator.NONE used in condition on {condition.column.name}"
            )
        col = _require_column(condition.column, "a condition column")
        parts.append(
            f"{col}{evaluator_token(condition.evaluator)}{_encode(condition.value, encode_values)}"
        )
    return CONDITION_SEPARATOR.join(parts)


def order_clause(order: DataOrder, include_prefix: bool = False) -> str:
    """
    Render the ordering fragment, e.g. `cast(col2 as unsigned) desc`.

    Columns are cast to unsigned so numeric strings sort numerically on the
    server. Returns an empty string when no ordering is requested.
    """
    if not order.is_ordered:
        return ""
    primary = _require_column(order.primary_column, "the primary sort column")
    expressions = [f"cast({primary} as unsigned)"]
    if order.secondary_column is not Column.NONE:
        expressions.append(f"cast({column_token(order.secondary_column)} as unsigned)")
    prefix = order_prefix(order.order_type) if include_prefix else ""
    return f"{prefix}{', '.join(expressions)} {order_direction_token(order.order_type)}"


def assignment_segment(update: ColumnValue, encode_values: bool = False) -> str:
    """Render one assignment as `{col}='{value}'`."""
    col = _require_column(update.column, "an update column")
    return f"{col}='{_encode(update.value, encode_values)}'"


@dataclass(frozen=True)
class RequestBuilder:
    """
    Builds request URLs for one CinchDB deployment.

    Attributes
    ----------
    base_url : str
        Scheme and host of the service, without a trailing slash.
    key_endpoint : str
        Path of the parameterless key-generation endpoint.
    encode_values : bool
        Whether to percent-encode caller-supplied values.
    """

    base_url: str
    key_endpoint: str = "generatekey.php"
    encode_values: bool = False

    def _root(self, key: str) -> str:
        if not key or not key.strip():
            raise QueryValidationError("A database key is required")
        return f"{self.base_url.rstrip('/')}/{key.strip()}"

    def _columns_path(self, record: Record) -> str:
        values = record.columns[:COLUMN_COUNT]
        return "".join("/" + _encode(value, self.encode_values) for value in values)

    def insert(self, key: str, record: Record) -> str:
        return f"{self._root(key)}/insert{self._columns_path(record)}"

    def delete_by_id(self, key: str, record_id: str) -> str:
        if not record_id:
            raise QueryValidationError("delete-by-id requires a record identifier")
        return f"{self._root(key)}/deletebykey/{_encode(record_id, self.encode_values)}"

    def update_by_id(self, key: str, record: Record) -> str:
        """Full-row overwrite: all ten columns are always emitted in order."""
        if not record.record_id:
            raise QueryValidationError("update-by-id requires a record identifier")
        record_id = _encode(record.record_id, self.encode_values)
        return f"{self._root(key)}/updatebyid/{record_id}{self._columns_path(record)}"

    def clear(self, key: str) -> str:
        return f"{self._root(key)}/clear"

    def retrieve_all(self, key: str) -> str:
        return f"{self._root(key)}/retrieve/csv"

    def retrieve(
        self,
        key: str,
        conditions: Sequence[Condition] = (),
        order: Optional[DataOrder] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> str:
        """
        Filtered retrieval. The condition and order segments are always
        present (possibly empty) and the limit is always explicit.
        """
        if limit <= 0:
            raise QueryValidationError(f"limit must be positive, got {limit}")
        clause = condition_clause(conditions, self.encode_values)
        ordering = order_clause(order) if order is not None else ""
        return f"{self._root(key)}/retrieve/csv/{clause}/{ordering}/{limit}"

    def update(
        self,
        key: str,
        conditions: Sequence[Condition],
        updates: Iterable[ColumnValue],
    ) -> str:
        clause = condition_clause(conditions, self.encode_values)
        assignments = "".join("/" + assignment_segment(u, self.encode_values) for u in updates)
        return f"{self._root(key)}/update/{clause}{assignments}"

    def delete(self, key: str, conditions: Sequence[Condition]) -> str:
        """
        Conditional delete. Refuses to build a request without conditions;
        emptying a database goes through `clear` only.
        """
        if not conditions:
            raise QueryValidationError("conditional delete requires at least one condition")
        return f"{self._root(key)}/delete/{condition_clause(conditions, self.encode_values)}"

    def generate_key(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.key_endpoint.lstrip('/')}"


__all__ = [
    "DEFAULT_LIMIT",
    "CONDITION_SEPARATOR",
    "RequestBuilder",
    "assignment_segment",
    "condition_clause",
    "order_clause",
]
