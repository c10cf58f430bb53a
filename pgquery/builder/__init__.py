"""pgquery statement builders: clause calls → ``$n``-parameterized SQL."""
from pgquery.builder.base import CompiledStatement, FilterableBuilder, QueryBuilder
from pgquery.builder.select import SelectBuilder
from pgquery.builder.update import UpdateBuilder

__all__ = [
    "CompiledStatement",
    "QueryBuilder",
    "FilterableBuilder",
    "SelectBuilder",
    "UpdateBuilder",
]
