from __future__ import annotations

import logging

import pytest

from cinchdb.domain.enums import Column, Evaluator, OrderType
from cinchdb.errors import QueryValidationError, TransportError
from cinchdb.queries import QueryState

BASE = "http://cinchdb.test/abc123"


@pytest.mark.asyncio
async def test_retrieve_query_builds_url_and_parses_rows(client, database, transport, make_row):
    transport.responses = ["\n".join([make_row("alice", "90", record_id="1"), "junk"])]

    query = client.retrieve(database)
    query.add_condition(Column.COLUMN1, Evaluator.EQUAL_TO, "alice")
    query.set_order(False, Column.COLUMN2)
    query.set_limit(1)
    records = await query.execute()

    assert transport.urls == [f"{BASE}/retrieve/csv/col1=alice/cast(col2 as unsigned) desc/1"]
    assert len(records) == 1
    assert records[0].columns[:2] == ["alice", "90"]
    assert query.state is QueryState.EXECUTED


@pytest.mark.asyncio
async def test_retrieve_query_defaults(client, database, transport):
    query = client.retrieve(database)
    assert query.limit == 1_000_000
    assert query.order.order_type is OrderType.NONE
    assert query.state is QueryState.BUILDING

    assert await query.execute() == []
    assert transport.urls == [f"{BASE}/retrieve/csv///1000000"]


@pytest.mark.asyncio
async def test_retrieve_query_secondary_order(client, database, transport):
    query = client.retrieve(database, limit=5)
    query.set_order(True, Column.COLUMN2, Column.COLUMN3)
    await query.execute()

    assert transport.urls == [
        f"{BASE}/retrieve/csv//cast(col2 as unsigned), cast(col3 as unsigned) asc/5"
    ]


@pytest.mark.asyncio
async def test_none_evaluator_fails_before_any_request(client, database, transport):
    query = client.retrieve(database)
    query.add_condition(Column.COLUMN1, Evaluator.NONE, "x")

    with pytest.raises(QueryValidationError):
        await query.execute()
    assert transport.urls == []
    assert query.state is QueryState.BUILDING


@pytest.mark.asyncio
async def test_update_query_sends_conditions_and_assignments(client, database, transport):
    query = client.update(database)
    query.add_condition(Column.COLUMN1, Evaluator.EQUAL_TO, "alice")
    query.add_condition(Column.COLUMN2, Evaluator.LESS_THAN, 50)
    query.add_updated_value(Column.COLUMN2, 50)
    query.add_updated_value(Column.COLUMN3, "capped")

    assert await query.execute() is None
    assert transport.urls == [
        f"{BASE}/update/col1=alice AND col2<50/col2='50'/col3='capped'"
    ]
    assert [u.column for u in query.updates] == [Column.COLUMN2, Column.COLUMN3]


@pytest.mark.asyncio
async def test_delete_query_with_conditions(client, database, transport):
    query = client.delete(database)
    query.add_condition(Column.COLUMN4, Evaluator.NOT_EQUAL_TO, "keep")

    assert await query.execute() is True
    assert transport.urls == [f"{BASE}/delete/col4!=keep"]
    assert query.state is QueryState.EXECUTED


@pytest.mark.asyncio
async def test_delete_query_without_conditions_is_refused(client, database, transport, caplog):
    query = client.delete(database)

    with caplog.at_level(logging.WARNING, logger="cinchdb.queries.delete"):
        sent = await query.execute()

    assert sent is False
    assert transport.urls == []
    assert "clear_all_records" in caplog.text


@pytest.mark.asyncio
async def test_query_propagates_transport_failure(client, database, transport):
    transport.fail_on = {0}
    query = client.retrieve(database)

    with pytest.raises(TransportError):
        await query.execute()
    assert len(transport.urls) == 1


def test_conditions_are_exposed_read_only(client, database):
    query = client.retrieve(database)
    query.add_condition(Column.COLUMN1, Evaluator.EQUAL_TO, "a")
    conditions = query.conditions
    assert isinstance(conditions, tuple)
    assert conditions[0].value == "a"
