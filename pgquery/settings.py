"""Pydantic settings model shared by all statement builders.

Settings are immutable and passed to a builder at construction time::

    from pgquery import BuilderSettings, SelectBuilder

    strict = BuilderSettings(strict_paging=True)
    builder = SelectBuilder("users", settings=strict)
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Largest number of bind parameters PostgreSQL accepts in one statement.
POSTGRES_MAX_PARAMS = 65535


class BuilderSettings(BaseModel):
    """Behaviour switches for ``SelectBuilder`` / ``UpdateBuilder``.

    Attributes:
        max_params: Parameter count above which the bucket logs a warning.
            Pushing never fails; the driver rejects the statement instead.
        strict_paging: Raise ``PagingAlreadySetError`` when ``limit`` or
            ``offset`` is called a second time instead of leaving the
            earlier value orphaned in the bucket.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_params: int = Field(default=POSTGRES_MAX_PARAMS, ge=1)
    strict_paging: bool = False


DEFAULT_SETTINGS = BuilderSettings()
