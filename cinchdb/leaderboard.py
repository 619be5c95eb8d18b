"""
Simple leaderboard on top of a CinchDB database.

Column 1 holds the player name and column 2 the score. Scores are stored as
text; they are parsed to float when read back, and ordering relies on the
server casting column 2 to an unsigned integer.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from cinchdb.client import CinchClient
from cinchdb.domain.enums import Column, Evaluator
from cinchdb.domain.models import Database, Record

NAME_COLUMN = Column.COLUMN1
SCORE_COLUMN = Column.COLUMN2


class Score(BaseModel):
    name: str
    score: float

    model_config = {"frozen": True}

    @classmethod
    def from_record(cls, record: Record) -> "Score":
        return cls(name=record.get(NAME_COLUMN) or "", score=float(record.get(SCORE_COLUMN) or 0))


class Leaderboard:
    """Leaderboard bound to one explicit database handle."""

    def __init__(self, client: CinchClient, database: Database) -> None:
        self.client = client
        self.database = database

    async def add_score(self, name: str, value: str | float) -> None:
        await self.client.add_records(self.database, Record.from_values(name, str(value)))

    async def get_scores(self, count: int) -> List[Score]:
        """Return the `count` best scores, highest first."""
        query = self.client.retrieve(self.database, limit=count)
        query.set_order(False, SCORE_COLUMN)
        records = await query.execute()
        return [Score.from_record(record) for record in records]

    async def get_highest_score_by_player(self, player_name: str) -> float:
        """Best score recorded for `player_name`, or 0.0 if they have none."""
        query = self.client.retrieve(self.database, limit=1)
        query.set_order(False, SCORE_COLUMN)
        query.add_condition(NAME_COLUMN, Evaluator.EQUAL_TO, player_name)
        records = await query.execute()
        if not records:
            return 0.0
        return Score.from_record(records[0]).score


__all__ = ["Leaderboard", "Score", "NAME_COLUMN", "SCORE_COLUMN"]
