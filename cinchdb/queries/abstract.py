"""
Base class for query objects.

A query object accumulates conditions (and, for updates, assignments) while
in the BUILDING state, then issues exactly one request when executed and moves
to EXECUTED. Query objects are single-use; configuring one after execution is
not supported.
"""

from __future__ import annotations

import abc
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Tuple

from cinchdb.domain.enums import Column, Evaluator
from cinchdb.domain.models import Condition, Database

if TYPE_CHECKING:
    from cinchdb.client import CinchClient


class QueryState(Enum):
    BUILDING = "building"
    EXECUTED = "executed"


class AbstractQuery(abc.ABC):
    """
    Shared condition handling for retrieve, update and delete queries.

    Subclasses set `operation` and implement `build_url` and `execute`.
    """

    operation: str

    def __init__(self, client: "CinchClient", database: Database) -> None:
        self._client = client
        self._database = database
        self._conditions: List[Condition] = []
        self._state = QueryState.BUILDING

    @property
    def database(self) -> Database:
        return self._database

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def conditions(self) -> Tuple[Condition, ...]:
        return tuple(self._conditions)

    def add_condition(self, column: Column, evaluator: Evaluator, value: Any) -> "AbstractQuery":
        """
        Add a filter predicate. Predicates are AND-combined in the order added.
        """
        self._conditions.append(Condition(column=column, evaluator=evaluator, value=str(value)))
        return self

    def _mark_executed(self) -> None:
        self._state = QueryState.EXECUTED

    @abc.abstractmethod
    def build_url(self) -> str:  # pragma: no cover - interface only
        """Serialize the accumulated query into a request URL."""
        raise NotImplementedError

    @abc.abstractmethod
    async def execute(self) -> Any:  # pragma: no cover - interface only
        """Issue the request."""
        raise NotImplementedError


__all__ = ["AbstractQuery", "QueryState"]
