"""
Pytest configuration for the CinchDB client.

Provides fixtures for:
- Test settings pointing at a fake service host
- A recording transport that captures every requested URL
- A client and database handle wired to that transport
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from cinchdb.client import CinchClient
from cinchdb.config import Settings
from cinchdb.domain.models import Database
from cinchdb.errors import TransportError

BASE_URL = "http://cinchdb.test"
TEST_KEY = "abc123"


class RecordingTransport:
    """
    In-memory transport. Returns queued bodies in order (empty once exhausted)
    and raises `TransportError` on the call indexes listed in `fail_on`.
    """

    def __init__(
        self,
        responses: Optional[Iterable[str]] = None,
        fail_on: Optional[Iterable[int]] = None,
    ) -> None:
        self.urls: List[str] = []
        self.responses = list(responses or [])
        self.fail_on = set(fail_on or ())

    async def fetch_text(self, url: str) -> str:
        index = len(self.urls)
        self.urls.append(url)
        if index in self.fail_on:
            raise TransportError("Server answered 500", url=url, status_code=500)
        return self.responses[index] if index < len(self.responses) else ""


def _make_row(*values: str, record_id: str = "1") -> str:
    columns = list(values) + [""] * (10 - len(values))
    return ",".join(columns + [record_id])


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        base_url=BASE_URL,
        key_endpoint="generatekey.php",
        database_key=TEST_KEY,
        http_timeout_seconds=5.0,
        default_limit=1_000_000,
        encode_values=False,
        log_level="DEBUG",
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport, test_settings: Settings) -> CinchClient:
    return CinchClient(transport=transport, settings=test_settings)


@pytest.fixture
def database() -> Database:
    return Database(key=TEST_KEY)


@pytest.fixture
def make_row():
    """Factory for well-formed 11-field response rows."""
    return _make_row
