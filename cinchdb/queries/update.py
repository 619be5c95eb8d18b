"""
Update query: assign new column values to every matching record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Tuple

from cinchdb.domain.enums import Column
from cinchdb.domain.models import ColumnValue, Database
from cinchdb.queries.abstract import AbstractQuery

if TYPE_CHECKING:
    from cinchdb.client import CinchClient


class UpdateQuery(AbstractQuery):
    """Set the accumulated column values on all records matching the conditions."""

    operation = "update"

    def __init__(self, client: "CinchClient", database: Database) -> None:
        super().__init__(client, database)
        self._updates: List[ColumnValue] = []

    @property
    def updates(self) -> Tuple[ColumnValue, ...]:
        return tuple(self._updates)

    def add_updated_value(self, column: Column, value: Any) -> "UpdateQuery":
        self._updates.append(ColumnValue(column=column, value=str(value)))
        return self

    def build_url(self) -> str:
        return self._client.builder.update(self._database.key, self._conditions, self._updates)

    async def execute(self) -> None:
        url = self.build_url()
        await self._client.request_text(self.operation, self._database, url)
        self._mark_executed()


__all__ = ["UpdateQuery"]
