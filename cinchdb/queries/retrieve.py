"""
Retrieve query: filtered, ordered and limited reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from cinchdb.domain.enums import Column, OrderType
from cinchdb.domain.models import Database, DataOrder, Record
from cinchdb.parser import parse_records
from cinchdb.queries.abstract import AbstractQuery

if TYPE_CHECKING:
    from cinchdb.client import CinchClient


class RetrieveQuery(AbstractQuery):
    """
    Collect the records matching all conditions.

    Ordering casts the sort columns to unsigned integers on the server, so it
    is meant for numeric columns such as scores or timestamps.

    Example
    -------
        query = client.retrieve(database)
        query.add_condition(Column.COLUMN1, Evaluator.EQUAL_TO, "alice")
        query.set_order(False, Column.COLUMN2)
        query.set_limit(1)
        records = await query.execute()
    """

    operation = "retrieve"

    def __init__(
        self,
        client: "CinchClient",
        database: Database,
        limit: Optional[int] = None,
    ) -> None:
        super().__init__(client, database)
        self._limit = limit if limit is not None else client.settings.default_limit
        self._order = DataOrder(order_type=OrderType.NONE)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def order(self) -> DataOrder:
        return self._order

    def set_limit(self, limit: int) -> "RetrieveQuery":
        """Set the maximum number of rows the server returns."""
        self._limit = limit
        return self

    def set_order(
        self,
        ascending: bool,
        primary_column: Column,
        secondary_column: Column = Column.NONE,
    ) -> "RetrieveQuery":
        """Sort by `primary_column`, breaking ties with `secondary_column`."""
        self._order = DataOrder(
            order_type=OrderType.ASCENDING if ascending else OrderType.DESCENDING,
            primary_column=primary_column,
            secondary_column=secondary_column,
        )
        return self

    def build_url(self) -> str:
        return self._client.builder.retrieve(
            self._database.key,
            conditions=self._conditions,
            order=self._order,
            limit=self._limit,
        )

    async def execute(self) -> List[Record]:
        url = self.build_url()
        body = await self._client.request_text(self.operation, self._database, url)
        self._mark_executed()
        return parse_records(body)


__all__ = ["RetrieveQuery"]
