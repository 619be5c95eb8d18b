from __future__ import annotations

import pytest

from cinchdb.leaderboard import Leaderboard, Score

BASE = "http://cinchdb.test/abc123"


@pytest.fixture
def leaderboard(client, database) -> Leaderboard:
    return Leaderboard(client, database)


@pytest.mark.asyncio
async def test_add_score_inserts_name_and_value(leaderboard, transport):
    await leaderboard.add_score("alice", 1250)
    assert transport.urls == [f"{BASE}/insert/alice/1250////////"]


@pytest.mark.asyncio
async def test_get_scores_orders_descending_by_score(leaderboard, transport, make_row):
    transport.responses = [
        make_row("alice", "300", record_id="1") + "\n" + make_row("bob", "120.5", record_id="2")
    ]

    scores = await leaderboard.get_scores(2)

    assert transport.urls == [f"{BASE}/retrieve/csv//cast(col2 as unsigned) desc/2"]
    assert scores == [Score(name="alice", score=300.0), Score(name="bob", score=120.5)]


@pytest.mark.asyncio
async def test_highest_score_by_player(leaderboard, transport, make_row):
    transport.responses = [make_row("bob", "77", record_id="4")]

    best = await leaderboard.get_highest_score_by_player("bob")

    assert best == 77.0
    assert transport.urls == [f"{BASE}/retrieve/csv/col1=bob/cast(col2 as unsigned) desc/1"]


@pytest.mark.asyncio
async def test_highest_score_defaults_to_zero(leaderboard, transport):
    assert await leaderboard.get_highest_score_by_player("nobody") == 0.0
