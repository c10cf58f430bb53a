"""Builder abstractions: CompiledStatement and the QueryBuilder ABC.

The Template Method pattern is used:
- ``QueryBuilder`` owns the parameter bucket and the terminal operations
  (``take_params`` / ``build``).
- ``FilterableBuilder`` adds the WHERE condition list shared by SELECT and
  UPDATE.
- ``SelectBuilder`` and ``UpdateBuilder`` implement ``get_query``.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar

from pgquery.bucket import BindValue, Bucket
from pgquery.settings import DEFAULT_SETTINGS, BuilderSettings

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="FilterableBuilder")


@dataclass(frozen=True)
class CompiledStatement:
    """The output of a finished builder.

    Attributes:
        sql: Statement text with ``$1..$N`` placeholders.
        params: Bound values; ``params[i - 1]`` binds ``$i``.
    """

    sql: str
    params: tuple[Any, ...]

    def as_args(self) -> list[Any]:
        """Return the params as a list for ``cursor.execute(sql, params)``."""
        return list(self.params)


class QueryBuilder(ABC):
    """Abstract base for statement builders.

    Args:
        table: Target table, inserted verbatim.
        settings: Optional builder settings; defaults to ``DEFAULT_SETTINGS``.
    """

    def __init__(self, table: str, settings: BuilderSettings | None = None) -> None:
        self._table = table
        self._settings = settings or DEFAULT_SETTINGS
        self._params = Bucket(settings=self._settings)

    @property
    def table(self) -> str:
        return self._table

    @property
    def settings(self) -> BuilderSettings:
        return self._settings

    @abstractmethod
    def get_query(self) -> str:
        """Render the statement text.  Pure; may be called any number of times."""

    def add_param(self, value: BindValue) -> int:
        """Bind ``value`` without adding a clause and return its index.

        Use the index to compose a raw condition::

            first = builder.add_param(18)
            second = builder.add_param(28)
            builder.where_condition(f"age = ${first} OR age = ${second}")
        """
        return self._params.push(value)

    def take_params(self) -> list[Any]:
        """Take the bound values in placeholder order.

        This consumes the builder's bucket and must be the last call made
        on the builder.

        Raises:
            BucketConsumedError: If the params were already taken.
        """
        return self._params.take()

    def build(self) -> CompiledStatement:
        """Render the statement and take its params in one terminal call."""
        sql = self.get_query()
        params = tuple(self.take_params())
        logger.debug("Built statement with %d param(s): %s", len(params), sql)
        return CompiledStatement(sql=sql, params=params)

    @staticmethod
    def _join_sections(sections: list[str | None]) -> str:
        return " ".join(s for s in sections if s)


class FilterableBuilder(QueryBuilder):
    """A builder with a WHERE clause (conditions joined by ``AND``)."""

    def __init__(self, table: str, settings: BuilderSettings | None = None) -> None:
        super().__init__(table, settings)
        self._conditions: list[str] = []

    def where_condition(self: _B, raw: str) -> _B:
        """Add a raw condition; any placeholders in it are the caller's."""
        self._conditions.append(raw)
        return self

    def add_where_raw(self: _B, raw: str) -> _B:
        return self.where_condition(raw)

    def where_eq(self: _B, field: str, value: BindValue) -> _B:
        """Add ``<field> = $n`` and bind ``value`` to it."""
        index = self.add_param(value)
        return self.where_condition(f"{field} = ${index}")

    def where_ne(self: _B, field: str, value: BindValue) -> _B:
        """Add ``<field> <> $n`` and bind ``value`` to it."""
        index = self.add_param(value)
        return self.where_condition(f"{field} <> ${index}")

    def _where_sql(self) -> str | None:
        if not self._conditions:
            return None
        return f"WHERE {' AND '.join(self._conditions)}"
