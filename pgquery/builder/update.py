"""UPDATE statement builder."""
from __future__ import annotations

from pgquery.bucket import BindValue
from pgquery.builder.base import FilterableBuilder
from pgquery.settings import BuilderSettings


class UpdateBuilder(FilterableBuilder):
    """Builds ``UPDATE <table> [SET …] [WHERE …]``.

    Example::

        builder = UpdateBuilder("users")
        builder.set("username", "rick").where_eq("id", 42)
        builder.get_query()
        # 'UPDATE users SET username = $1 WHERE id = $2'
    """

    def __init__(self, table: str, settings: BuilderSettings | None = None) -> None:
        super().__init__(table, settings)
        self._fields: list[str] = []

    def set(self, field: str, value: BindValue) -> UpdateBuilder:
        """Add ``<field> = $n`` and bind ``value`` to it."""
        index = self.add_param(value)
        self._fields.append(f"{field} = ${index}")
        return self

    def set_computed(self, field: str, expression: str) -> UpdateBuilder:
        """Add ``<field> = <expression>`` with the expression inserted verbatim."""
        self._fields.append(f"{field} = {expression}")
        return self

    def get_query(self) -> str:
        set_sql = f"SET {', '.join(self._fields)}" if self._fields else None
        return self._join_sections([f"UPDATE {self._table}", set_sql, self._where_sql()])
