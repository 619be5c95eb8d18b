from __future__ import annotations

import logging

import pytest

from cinchdb.domain.models import Record
from cinchdb.errors import QueryValidationError, TransportError

BASE = "http://cinchdb.test/abc123"


@pytest.mark.asyncio
async def test_batch_insert_issues_one_call_per_record(client, database, transport):
    records = [Record.from_values(f"p{i}", str(i)) for i in range(3)]

    await client.add_records(database, *records)

    assert transport.urls == [f"{BASE}/insert/p{i}/{i}////////" for i in range(3)]


@pytest.mark.asyncio
async def test_batch_insert_stops_at_first_failure(client, database, transport):
    transport.fail_on = {1}
    records = [Record.from_values(f"p{i}") for i in range(3)]

    with pytest.raises(TransportError):
        await client.add_records(database, *records)

    # First insert went through, second failed, third was never attempted.
    assert len(transport.urls) == 2
    assert transport.urls[0].endswith("/insert/p0/////////")
    assert transport.urls[1].endswith("/insert/p1/////////")


@pytest.mark.asyncio
async def test_add_record_from_values(client, database, transport):
    record = await client.add_record(database, "alice", "42")
    assert record.columns[:2] == ["alice", "42"]
    assert transport.urls == [f"{BASE}/insert/alice/42////////"]


@pytest.mark.asyncio
async def test_delete_records_skips_unsaved(client, database, transport):
    saved = Record.from_values(*[""] * 10, "11")
    unsaved = Record.from_values("draft")

    await client.delete_records(database, saved, unsaved)

    assert transport.urls == [f"{BASE}/deletebykey/11"]


@pytest.mark.asyncio
async def test_update_records_writes_every_column(client, database, transport):
    record = Record.from_values("a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "5")
    record.columns[1] = "B"

    await client.update_records(database, record, Record())

    assert transport.urls == [f"{BASE}/updatebyid/5/a/B/c/d/e/f/g/h/i/j"]


@pytest.mark.asyncio
async def test_save_record_routes_on_identifier(client, database, transport):
    await client.save_record(database, Record.from_values("new"))
    await client.save_record(database, Record(columns=["old"], record_id="3"))

    assert transport.urls[0] == f"{BASE}/insert/new/////////"
    assert transport.urls[1] == f"{BASE}/updatebyid/3/old/////////"


@pytest.mark.asyncio
async def test_clear_all_records(client, database, transport):
    await client.clear_all_records(database)
    assert transport.urls == [f"{BASE}/clear"]


@pytest.mark.asyncio
async def test_get_all_records_parses_response(client, database, transport, make_row):
    transport.responses = [make_row("x", record_id="1") + "\n" + make_row("y", record_id="2")]

    records = await client.get_all_records(database)

    assert transport.urls == [f"{BASE}/retrieve/csv"]
    assert [r.record_id for r in records] == ["1", "2"]


@pytest.mark.asyncio
async def test_generate_database_key_trims_whitespace(client, transport):
    transport.responses = ["  newkey42 \n"]

    key = await client.generate_database_key()

    assert key == "newkey42"
    assert transport.urls == ["http://cinchdb.test/generatekey.php"]


@pytest.mark.asyncio
async def test_create_database_wraps_new_key(client, transport):
    transport.responses = ["fresh\n"]

    database = await client.create_database(column_headers=["Name", "Score"], visible_columns=2)

    assert database.key == "fresh"
    assert database.column_headers[:3] == ["Name", "Score", "Column 3"]
    assert database.visible_columns == 2


@pytest.mark.asyncio
async def test_transport_failure_is_logged_with_key_redacted(client, database, transport, caplog):
    transport.fail_on = {0}

    with caplog.at_level(logging.ERROR, logger="cinchdb.client"):
        with pytest.raises(TransportError) as excinfo:
            await client.clear_all_records(database)

    assert "abc123" not in excinfo.value.url
    assert excinfo.value.url.endswith("/***/clear")
    assert excinfo.value.status_code == 500
    assert "CLEAR FAILED" in caplog.text


@pytest.mark.asyncio
async def test_empty_key_is_rejected_before_sending(client, transport):
    from cinchdb.domain.models import Database

    with pytest.raises(QueryValidationError):
        await client.clear_all_records(Database(key=""))
    assert transport.urls == []


@pytest.mark.asyncio
async def test_redaction_only_masks_the_key_segment(client, transport):
    from cinchdb.domain.models import Database

    transport.fail_on = {0}

    with pytest.raises(TransportError) as excinfo:
        await client.add_record(Database(key="a"), "alice", "a")

    assert excinfo.value.url == "http://cinchdb.test/***/insert/alice/a////////"
