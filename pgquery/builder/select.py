"""SELECT statement builder."""
from __future__ import annotations

import logging

from pgquery.builder.base import FilterableBuilder
from pgquery.clauses import Join, Order
from pgquery.errors import PagingAlreadySetError, UnsupportedValueError
from pgquery.settings import BuilderSettings

logger = logging.getLogger(__name__)


class SelectBuilder(FilterableBuilder):
    """Builds ``[WITH …] SELECT … FROM … [JOIN …] [WHERE …] [GROUP BY …]
    [ORDER BY …] [LIMIT …] [OFFSET …]``.

    Methods may be called in any order; parameters are numbered in call
    order while sections are always rendered in SQL order::

        builder = SelectBuilder("users")
        builder.select("id").select("name")
        builder.where_eq("active", True).limit(10)
        builder.get_query()
        # 'SELECT id, name FROM users WHERE active = $1 LIMIT $2'
        builder.take_params()
        # [True, 10]

    Args:
        table: Table for the ``FROM`` clause.
        settings: Optional builder settings.
    """

    def __init__(self, table: str, settings: BuilderSettings | None = None) -> None:
        super().__init__(table, settings)
        self._with_queries: list[tuple[str, str]] = []
        self._columns: list[str] = []
        self._joins: list[Join] = []
        self._groups: list[str] = []
        self._order: list[Order] = []
        self._limit: str | None = None
        self._offset: str | None = None

    # ------------------------------------------------------------------
    # Clauses
    # ------------------------------------------------------------------

    def with_query(self, name: str, query: str) -> SelectBuilder:
        """Register a CTE rendered as ``name AS (query)``."""
        self._with_queries.append((name, query))
        return self

    def select(self, column: str) -> SelectBuilder:
        self._columns.append(column)
        return self

    def join(self, join: Join) -> SelectBuilder:
        self._joins.append(join)
        return self

    def inner_join(self, table: str, condition: str) -> SelectBuilder:
        return self.join(Join.inner(table, condition))

    def left_join(self, table: str, condition: str) -> SelectBuilder:
        return self.join(Join.left(table, condition))

    def left_outer_join(self, table: str, condition: str) -> SelectBuilder:
        return self.join(Join.left_outer(table, condition))

    def group_by(self, field: str) -> SelectBuilder:
        self._groups.append(field)
        return self

    def order_by(self, order: Order) -> SelectBuilder:
        self._order.append(order)
        return self

    def limit(self, limit: int) -> SelectBuilder:
        """Bind the integer ``limit`` and render ``LIMIT $n``.

        Calling this twice renders only the latest placeholder; the earlier
        value stays in the bucket unused unless ``strict_paging`` is on.
        """
        self._limit = self._paging_placeholder("LIMIT", self._limit, limit)
        return self

    def offset(self, offset: int) -> SelectBuilder:
        """Bind ``offset`` and render ``OFFSET $n`` (see :meth:`limit`)."""
        self._offset = self._paging_placeholder("OFFSET", self._offset, offset)
        return self

    def _paging_placeholder(self, clause: str, current: str | None, value: int) -> str:
        if not isinstance(value, int) or isinstance(value, bool):
            raise UnsupportedValueError(type(value), clause)
        if current is not None:
            if self._settings.strict_paging:
                raise PagingAlreadySetError(clause, current)
            logger.warning(
                "%s set twice; parameter %s stays bound but unused", clause, current
            )
        return f"${self.add_param(value)}"

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get_query(self) -> str:
        return self._join_sections(
            [
                self._with_sql(),
                self._select_sql(),
                f"FROM {self._table}",
                self._joins_sql(),
                self._where_sql(),
                self._group_by_sql(),
                self._order_by_sql(),
                f"LIMIT {self._limit}" if self._limit else None,
                f"OFFSET {self._offset}" if self._offset else None,
            ]
        )

    def _with_sql(self) -> str | None:
        if not self._with_queries:
            return None
        ctes = ", ".join(f"{name} AS ({query})" for name, query in self._with_queries)
        return f"WITH {ctes}"

    def _select_sql(self) -> str:
        columns = ", ".join(self._columns) if self._columns else "*"
        return f"SELECT {columns}"

    def _joins_sql(self) -> str | None:
        return " ".join(j.to_sql() for j in self._joins) or None

    def _group_by_sql(self) -> str | None:
        if not self._groups:
            return None
        return f"GROUP BY {', '.join(self._groups)}"

    def _order_by_sql(self) -> str | None:
        if not self._order:
            return None
        return f"ORDER BY {', '.join(o.to_sql() for o in self._order)}"
