"""
Delete query: remove every record matching the conditions.
"""

from __future__ import annotations

from cinchdb.queries.abstract import AbstractQuery
from cinchdb.utils.logging import get_logger

log = get_logger(__name__)


class DeleteQuery(AbstractQuery):
    """
    Delete all matching records.

    WARNING: a delete without conditions would empty the whole database. It is
    refused locally, logged, and no request is sent. Use
    `CinchClient.clear_all_records` to empty a database on purpose.
    """

    operation = "delete"

    def build_url(self) -> str:
        return self._client.builder.delete(self._database.key, self._conditions)

    async def execute(self) -> bool:
        """
        Returns
        -------
        bool
            True if the request was sent, False if it was refused for lack of
            conditions.
        """
        if not self._conditions:
            log.warning(
                "Refused delete without conditions; it would remove every record. "
                "Use clear_all_records() to empty the database instead.",
                extra={"operation": self.operation},
            )
            return False
        url = self.build_url()
        await self._client.request_text(self.operation, self._database, url)
        self._mark_executed()
        return True


__all__ = ["DeleteQuery"]
