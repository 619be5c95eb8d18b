"""
Client facade for a CinchDB deployment.

Wraps the primitive remote operations (insert, delete-by-id, update-by-id,
clear, retrieve, key generation) and hands out query objects. Each primitive
builds one URL, issues one GET through the injected transport and waits for
the full body.

Batch operations send one request per record, strictly in sequence. They are
not transactional: if a request fails, the records before it stay applied, the
failing record and those after it are not, and the error propagates.

Usage:
    async with CinchClient() as client:
        database = Database(key="...")
        await client.add_record(database, "alice", "42")
        records = await client.get_all_records(database)
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from cinchdb.config import Settings, get_settings
from cinchdb.domain.enums import COLUMN_COUNT
from cinchdb.domain.models import Database, Record
from cinchdb.errors import TransportError
from cinchdb.infrastructure.transport import HttpxTransport, Transport
from cinchdb.parser import parse_records
from cinchdb.queries.delete import DeleteQuery
from cinchdb.queries.retrieve import RetrieveQuery
from cinchdb.queries.update import UpdateQuery
from cinchdb.request_builder import RequestBuilder
from cinchdb.utils.logging import get_logger

log = get_logger(__name__)


def _redact(url: str, base_url: str, key: str) -> str:
    """Mask the key segment that directly follows the base URL."""
    root = f"{base_url.rstrip('/')}/{key}"
    if key and (url == root or url.startswith(root + "/")):
        return f"{base_url.rstrip('/')}/***{url[len(root) :]}"
    return url


class CinchClient:
    """
    Entry point for all remote operations.

    Parameters
    ----------
    transport : Transport | None
        Fetches URLs. Defaults to an `HttpxTransport` owned by this client.
    settings : Settings | None
        Service location and request defaults. Defaults to `get_settings()`.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(
            timeout=self.settings.http_timeout_seconds
        )
        self.builder = RequestBuilder(
            base_url=self.settings.base_url,
            key_endpoint=self.settings.key_endpoint,
            encode_values=self.settings.encode_values,
        )

    async def request_text(self, operation: str, database: Optional[Database], url: str) -> str:
        """
        Send one request and return the response body.

        Any failure raised by the transport is surfaced as `TransportError`,
        logged with the key redacted, and re-raised.
        """
        key = database.key if database is not None else ""
        redacted = _redact(url, self.settings.base_url, key)
        log.debug(f"[{operation.upper()}] {redacted}", extra={"operation": operation})
        try:
            try:
                return await self.transport.fetch_text(url)
            except TransportError:
                raise
            except Exception as exc:
                raise TransportError(
                    f"Request failed: {exc.__class__.__name__}", url=url
                ) from exc
        except TransportError as exc:
            exc.url = _redact(exc.url, self.settings.base_url, key)
            log.error(
                f"[{operation.upper()} FAILED] {exc}",
                extra={"operation": operation, "status_code": exc.status_code},
            )
            raise

    # Query objects

    def retrieve(self, database: Database, limit: Optional[int] = None) -> RetrieveQuery:
        return RetrieveQuery(self, database, limit=limit)

    def update(self, database: Database) -> UpdateQuery:
        return UpdateQuery(self, database)

    def delete(self, database: Database) -> DeleteQuery:
        return DeleteQuery(self, database)

    # Primitive operations

    async def add_records(self, database: Database, *records: Record) -> None:
        """Insert each record with its own request, in order."""
        log.info("Inserting records", extra={"operation": "insert", "count": len(records)})
        for record in records:
            await self.request_text("insert", database, self.builder.insert(database.key, record))

    async def add_record(self, database: Database, *values: Optional[str]) -> Record:
        """Insert a single record built from positional column values."""
        record = Record.from_values(*values[:COLUMN_COUNT])
        await self.add_records(database, record)
        return record

    async def delete_records(self, database: Database, *records: Record) -> None:
        """
        Delete specific records by identifier. Records that were never
        persisted (empty identifier) are skipped.
        """
        persisted = _persisted(records, "delete")
        log.info("Deleting records", extra={"operation": "deletebykey", "count": len(persisted)})
        for record in persisted:
            url = self.builder.delete_by_id(database.key, record.record_id)
            await self.request_text("deletebykey", database, url)

    async def update_records(self, database: Database, *records: Record) -> None:
        """
        Overwrite all ten columns of each persisted record. Records with an
        empty identifier are skipped.
        """
        persisted = _persisted(records, "update")
        log.info("Updating records", extra={"operation": "updatebyid", "count": len(persisted)})
        for record in persisted:
            url = self.builder.update_by_id(database.key, record)
            await self.request_text("updatebyid", database, url)

    async def save_record(self, database: Database, record: Record) -> None:
        """Insert a new record, or overwrite an existing one by identifier."""
        if record.is_new:
            await self.add_records(database, record)
        else:
            await self.update_records(database, record)

    async def clear_all_records(self, database: Database) -> None:
        """
        Delete every record in the database. There is no undo.
        """
        log.warning("Clearing all records", extra={"operation": "clear"})
        await self.request_text("clear", database, self.builder.clear(database.key))

    async def get_all_records(self, database: Database) -> List[Record]:
        url = self.builder.retrieve_all(database.key)
        body = await self.request_text("retrieve", database, url)
        records = parse_records(body)
        log.info("Records retrieved", extra={"operation": "retrieve", "rows": len(records)})
        return records

    async def generate_database_key(self) -> str:
        """Ask the service to mint a new database and return its key."""
        body = await self.request_text("generatekey", None, self.builder.generate_key())
        return body.strip()

    async def create_database(
        self,
        column_headers: Optional[Sequence[str]] = None,
        visible_columns: int = 5,
    ) -> Database:
        """Generate a key and wrap it in a new `Database` handle."""
        key = await self.generate_database_key()
        return Database(
            key=key,
            column_headers=list(column_headers or []),
            visible_columns=visible_columns,
        )

    # Lifecycle

    async def aclose(self) -> None:
        """Release the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, HttpxTransport):
            await self.transport.aclose()

    async def __aenter__(self) -> "CinchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def _persisted(records: Sequence[Record], action: str) -> List[Record]:
    persisted = [r for r in records if not r.is_new]
    skipped = len(records) - len(persisted)
    if skipped:
        log.debug(f"Skipping {skipped} unsaved record(s) on {action}")
    return persisted


__all__ = ["CinchClient"]
