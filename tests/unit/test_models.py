from __future__ import annotations

import pytest
from pydantic import ValidationError

from cinchdb.domain.enums import Column, OrderType
from cinchdb.domain.models import DEFAULT_COLUMN_HEADERS, Condition, Database, DataOrder, Record

COLUMN_COUNT = 10


def test_record_defaults_to_ten_empty_columns():
    record = Record()
    assert record.columns == [None] * COLUMN_COUNT
    assert record.record_id == ""
    assert record.is_new


def test_record_from_fewer_values_pads_to_ten():
    record = Record.from_values("alice", "42")
    assert len(record.columns) == COLUMN_COUNT
    assert record.columns[:2] == ["alice", "42"]
    assert record.columns[2:] == [None] * 8
    assert record.record_id == ""


def test_record_from_eleven_values_reads_identifier():
    values = [f"v{i}" for i in range(10)] + ["77"]
    record = Record.from_values(*values)
    assert record.columns == values[:10]
    assert record.record_id == "77"
    assert not record.is_new


def test_record_ignores_values_beyond_eleven():
    values = [f"v{i}" for i in range(12)]
    record = Record.from_values(*values)
    assert record.columns == values[:10]
    assert record.record_id == ""


def test_record_constructor_truncates_long_column_lists():
    record = Record(columns=[str(i) for i in range(15)])
    assert record.columns == [str(i) for i in range(10)]


def test_record_get_and_set_by_column():
    record = Record()
    record.set(Column.COLUMN3, "desc")
    assert record.get(Column.COLUMN3) == "desc"
    assert record.columns[2] == "desc"
    assert len(record.columns) == COLUMN_COUNT


def test_record_rejects_none_column_access():
    with pytest.raises(ValueError):
        Record().get(Column.NONE)


def test_condition_is_immutable():
    condition = Condition(column=Column.COLUMN1, evaluator="equal_to", value="x")
    with pytest.raises(ValidationError):
        condition.value = "y"


def test_data_order_defaults():
    order = DataOrder()
    assert order.order_type is OrderType.NONE
    assert order.primary_column is Column.NONE
    assert order.secondary_column is Column.NONE
    assert not order.is_ordered


def test_database_defaults_and_key_trimming():
    database = Database(key="  key123\n")
    assert database.key == "key123"
    assert database.column_headers == DEFAULT_COLUMN_HEADERS
    assert database.visible_columns == 5


def test_database_pads_partial_headers():
    database = Database(key="k", column_headers=["Name", "Score"])
    assert database.header(Column.COLUMN1) == "Name"
    assert database.header(Column.COLUMN2) == "Score"
    assert database.header(Column.COLUMN10) == "Column 10"


def test_database_rejects_out_of_range_visible_columns():
    with pytest.raises(ValidationError):
        Database(key="k", visible_columns=11)
