"""
Query objects for the CinchDB client.

Re-exports the abstract base and the concrete retrieve, update and delete
queries so downstream code can import from `cinchdb.queries` directly.
"""

from cinchdb.queries.abstract import AbstractQuery, QueryState
from cinchdb.queries.delete import DeleteQuery
from cinchdb.queries.retrieve import RetrieveQuery
from cinchdb.queries.update import UpdateQuery

__all__ = [
    "AbstractQuery",
    "QueryState",
    "DeleteQuery",
    "RetrieveQuery",
    "UpdateQuery",
]
