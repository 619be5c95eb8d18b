"""
Parsing of CSV retrieval responses.

The service answers retrievals with newline-separated rows of exactly eleven
comma-separated fields: ten data columns followed by the record identifier.
There is no header and no quoting, so a value containing a comma corrupts its
row; such rows, blank lines and anything else with a different field count are
dropped without error.
"""

from __future__ import annotations

from typing import Iterator, List

from cinchdb.domain.enums import COLUMN_COUNT
from cinchdb.domain.models import Record

ROW_FIELD_COUNT = COLUMN_COUNT + 1


def iter_records(response_text: str) -> Iterator[Record]:
    """Yield a `Record` for every well-formed row, in response order."""
    for line in response_text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            continue
        fields = line.split(",")
        if len(fields) == ROW_FIELD_COUNT:
            yield Record.from_values(*fields)


def parse_records(response_text: str) -> List[Record]:
    return list(iter_records(response_text))


__all__ = ["ROW_FIELD_COUNT", "iter_records", "parse_records"]
