"""
Domain package for the CinchDB client.

Exports the record model, the query vocabulary and the database handle.
Keep this package free of I/O.
"""

from cinchdb.domain.enums import (
    COLUMN_COUNT,
    SCHEMA,
    Column,
    Evaluator,
    OrderType,
    column_token,
    evaluator_token,
    order_direction_token,
    order_prefix,
)
from cinchdb.domain.models import ColumnValue, Condition, Database, DataOrder, Record

__all__ = [
    "COLUMN_COUNT",
    "SCHEMA",
    "Column",
    "Evaluator",
    "OrderType",
    "column_token",
    "evaluator_token",
    "order_direction_token",
    "order_prefix",
    "ColumnValue",
    "Condition",
    "Database",
    "DataOrder",
    "Record",
]
