"""pgquery – parameterized PostgreSQL statement builders.

Build statements clause by clause; values are bound to ``$1..$N``
placeholders in the order they are added, whatever clause they land in.

Public API
----------
``SelectBuilder`` / ``UpdateBuilder``
    Fluent builders.  ``get_query()`` renders the SQL text; ``build()``
    returns a :class:`CompiledStatement` and consumes the bound params.

``Join`` / ``Order``
    JOIN and ORDER BY value types.

``Bucket``
    The positional parameter accumulator used by every builder.

Usage::

    from pgquery import Order, SelectBuilder

    stmt = (
        SelectBuilder("users")
        .select("id")
        .where_eq("tenant_id", tenant)
        .order_by(Order.desc("created_at"))
        .limit(20)
        .build()
    )
    with conn.cursor() as cur:  # psycopg.RawCursor
        cur.execute(stmt.sql, stmt.as_args())
"""

from __future__ import annotations

from pgquery.bucket import BindValue, Bucket
from pgquery.builder import (
    CompiledStatement,
    FilterableBuilder,
    QueryBuilder,
    SelectBuilder,
    UpdateBuilder,
)
from pgquery.clauses import Direction, Join, JoinKind, Order
from pgquery.errors import (
    BucketConsumedError,
    PagingAlreadySetError,
    PgQueryError,
    UnsupportedValueError,
)
from pgquery.settings import DEFAULT_SETTINGS, POSTGRES_MAX_PARAMS, BuilderSettings

__all__ = [
    # Builders
    "SelectBuilder",
    "UpdateBuilder",
    "QueryBuilder",
    "FilterableBuilder",
    "CompiledStatement",
    # Parameters
    "Bucket",
    "BindValue",
    # Clause vocabulary
    "Join",
    "JoinKind",
    "Order",
    "Direction",
    # Settings
    "BuilderSettings",
    "DEFAULT_SETTINGS",
    "POSTGRES_MAX_PARAMS",
    # Errors
    "PgQueryError",
    "BucketConsumedError",
    "UnsupportedValueError",
    "PagingAlreadySetError",
]
