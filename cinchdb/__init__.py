"""
CinchDB client - query building and request serialization for CinchDB.

CinchDB is a hosted, schema-less store: every database is one table of ten
untyped string columns plus a server-assigned record identifier, addressed
by an opaque key and driven entirely through HTTP GET requests. This package
provides:

- Typed records, conditions, assignments and ordering
- A request builder that owns the wire format
- A strict parser for the CSV retrieval format
- Retrieve / update / delete query objects
- An async client facade with sequential, non-transactional batch operations
- Leaderboard and spatial-anchor metadata helpers built on the client
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from cinchdb.anchors import AnchorMetadata, AnchorStore
from cinchdb.client import CinchClient
from cinchdb.config import Settings, get_settings
from cinchdb.domain import (
    Column,
    ColumnValue,
    Condition,
    Database,
    DataOrder,
    Evaluator,
    OrderType,
    Record,
)
from cinchdb.errors import CinchDBError, QueryValidationError, TransportError
from cinchdb.infrastructure import CallableTransport, HttpxTransport, Transport
from cinchdb.leaderboard import Leaderboard, Score
from cinchdb.parser import parse_records
from cinchdb.queries import DeleteQuery, RetrieveQuery, UpdateQuery
from cinchdb.request_builder import RequestBuilder
from cinchdb.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Column",
    "ColumnValue",
    "Condition",
    "Database",
    "DataOrder",
    "Evaluator",
    "OrderType",
    "Record",
    # Errors
    "CinchDBError",
    "QueryValidationError",
    "TransportError",
    # Wire format
    "RequestBuilder",
    "parse_records",
    # Client and queries
    "CinchClient",
    "DeleteQuery",
    "RetrieveQuery",
    "UpdateQuery",
    "CallableTransport",
    "HttpxTransport",
    "Transport",
    # Helpers
    "AnchorMetadata",
    "AnchorStore",
    "Leaderboard",
    "Score",
    # Logging
    "configure_logging",
    "get_logger",
]
