"""JOIN and ORDER BY value types shared by the statement builders.

Both are immutable pydantic models with a discriminating tag::

    Join.inner("departments", "departments.id = users.department_id")
    Order.desc("created_at")
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

JoinKind = Literal["INNER", "LEFT", "LEFT OUTER"]
Direction = Literal["ASC", "DESC"]

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class Join(BaseModel):
    """A single ``<KIND> JOIN <table> ON <condition>`` fragment.

    Attributes:
        kind: ``'INNER'``, ``'LEFT'`` or ``'LEFT OUTER'``.
        table: Joined table, inserted verbatim.
        condition: Raw ON expression, inserted verbatim.
    """

    model_config = _FROZEN

    kind: JoinKind
    table: str
    condition: str

    @classmethod
    def inner(cls, table: str, condition: str) -> Join:
        return cls(kind="INNER", table=table, condition=condition)

    @classmethod
    def left(cls, table: str, condition: str) -> Join:
        return cls(kind="LEFT", table=table, condition=condition)

    @classmethod
    def left_outer(cls, table: str, condition: str) -> Join:
        return cls(kind="LEFT OUTER", table=table, condition=condition)

    def to_sql(self) -> str:
        return f"{self.kind} JOIN {self.table} ON {self.condition}"

    def __str__(self) -> str:
        return self.to_sql()


class Order(BaseModel):
    """A single ``<column> ASC|DESC`` ORDER BY term."""

    model_config = _FROZEN

    column: str
    direction: Direction = "ASC"

    @classmethod
    def asc(cls, column: str) -> Order:
        return cls(column=column, direction="ASC")

    @classmethod
    def desc(cls, column: str) -> Order:
        return cls(column=column, direction="DESC")

    def to_sql(self) -> str:
        return f"{self.column} {self.direction}"

    def __str__(self) -> str:
        return self.to_sql()
