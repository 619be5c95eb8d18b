"""
Persistence of spatial anchor metadata.

The AR application stores one record per cloud anchor: the anchor identifier
issued by the spatial anchor service, a display name, a free-text description
and the local creation time. Anchor placement and resolution themselves are
handled by the anchor service and are not part of this package.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from cinchdb.client import CinchClient
from cinchdb.domain.enums import Column, Evaluator
from cinchdb.domain.models import Database, Record
from cinchdb.utils.logging import get_logger

log = get_logger(__name__)

ANCHOR_ID_COLUMN = Column.COLUMN1
NAME_COLUMN = Column.COLUMN2
DESCRIPTION_COLUMN = Column.COLUMN3
CREATED_AT_COLUMN = Column.COLUMN4

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AnchorMetadata(BaseModel):
    """Metadata describing one placed anchor."""

    anchor_id: str = Field(..., description="Identifier from the cloud anchor service.")
    name: str = ""
    description: str = ""
    created_at: str = Field(
        default_factory=lambda: datetime.now().strftime(TIMESTAMP_FORMAT),
        description="Local creation time, YYYY-MM-DD HH:MM:SS.",
    )
    record_id: str = Field("", description="Server record identifier, empty until saved.")

    def to_record(self) -> Record:
        record = Record(record_id=self.record_id)
        record.set(ANCHOR_ID_COLUMN, self.anchor_id)
        record.set(NAME_COLUMN, self.name)
        record.set(DESCRIPTION_COLUMN, self.description)
        record.set(CREATED_AT_COLUMN, self.created_at)
        return record

    @classmethod
    def from_record(cls, record: Record) -> "AnchorMetadata":
        return cls(
            anchor_id=record.get(ANCHOR_ID_COLUMN) or "",
            name=record.get(NAME_COLUMN) or "",
            description=record.get(DESCRIPTION_COLUMN) or "",
            created_at=record.get(CREATED_AT_COLUMN) or "",
            record_id=record.record_id,
        )


class AnchorStore:
    """Anchor metadata stored in one CinchDB database."""

    def __init__(self, client: CinchClient, database: Database) -> None:
        self.client = client
        self.database = database

    async def save_anchor(self, anchor: AnchorMetadata) -> None:
        """Insert a new anchor, or overwrite a previously loaded one."""
        log.info("Saving anchor", extra={"anchor_id": anchor.anchor_id})
        await self.client.save_record(self.database, anchor.to_record())

    async def list_anchors(self) -> List[AnchorMetadata]:
        records = await self.client.get_all_records(self.database)
        return [AnchorMetadata.from_record(record) for record in records]

    async def find_anchor(self, anchor_id: str) -> Optional[AnchorMetadata]:
        query = self.client.retrieve(self.database, limit=1)
        query.add_condition(ANCHOR_ID_COLUMN, Evaluator.EQUAL_TO, anchor_id)
        records = await query.execute()
        return AnchorMetadata.from_record(records[0]) if records else None

    async def rename_anchor(
        self,
        anchor: AnchorMetadata,
        name: str,
        description: Optional[str] = None,
    ) -> AnchorMetadata:
        """
        Change the display name (and optionally the description) of a saved
        anchor. The whole row is rewritten by identifier.
        """
        if not anchor.record_id:
            raise ValueError("Anchor has not been saved yet")
        updated = anchor.model_copy(
            update={
                "name": name,
                "description": anchor.description if description is None else description,
            }
        )
        await self.client.update_records(self.database, updated.to_record())
        return updated

    async def delete_anchor(self, anchor: AnchorMetadata) -> None:
        await self.client.delete_records(self.database, anchor.to_record())


__all__ = [
    "AnchorMetadata",
    "AnchorStore",
    "ANCHOR_ID_COLUMN",
    "NAME_COLUMN",
    "DESCRIPTION_COLUMN",
    "CREATED_AT_COLUMN",
    "TIMESTAMP_FORMAT",
]
