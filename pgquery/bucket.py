"""Positional parameter accumulator.

A :class:`Bucket` collects the bind values of a single statement.  Each
pushed value receives the 1-based index of its ``$n`` placeholder, so
clause fragments can be rendered immediately while values are handed to the
driver later, in the same order, by :meth:`Bucket.take`.

The bucket does not decide which types the driver can encode; adaptation is
left to the driver (psycopg dumpers, asyncpg codecs).  JSON values should be
wrapped (``psycopg.types.json.Jsonb``) unless a dumper for ``dict`` has been
registered on the connection.
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from pgquery.errors import BucketConsumedError, UnsupportedValueError
from pgquery.settings import DEFAULT_SETTINGS, BuilderSettings

logger = logging.getLogger(__name__)

#: A value accepted by :meth:`Bucket.push`: anything the driver can adapt
#: that can also be duplicated with :func:`copy.deepcopy`.
BindValue = Any


def duplicate_bind_value(value: BindValue) -> BindValue:
    """Return an independent copy of ``value``.

    Raises:
        UnsupportedValueError: If ``value`` cannot be copied (e.g. a
            ``memoryview`` or an open file).
    """
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as exc:
        raise UnsupportedValueError(type(value)) from exc


@dataclass
class Bucket:
    """Ordered, index-assigning container of statement parameters.

    Values are copied on push so later changes to caller-owned lists or
    dicts never leak into the statement.  The bucket is consumed by
    :meth:`take`; after that it refuses further use.
    """

    settings: BuilderSettings = DEFAULT_SETTINGS
    _values: list[Any] = field(default_factory=list, init=False, repr=False)
    _consumed: bool = field(default=False, init=False)
    _over_limit_warned: bool = field(default=False, init=False, repr=False)

    def push(self, value: BindValue) -> int:
        """Store a copy of ``value`` and return its 1-based placeholder index."""
        if self._consumed:
            raise BucketConsumedError("push")
        self._values.append(duplicate_bind_value(value))
        index = len(self._values)
        logger.debug("Bound $%d (%s)", index, type(value).__name__)

        if index > self.settings.max_params and not self._over_limit_warned:
            self._over_limit_warned = True
            logger.warning(
                "Statement has %d parameters, more than the %d the server accepts",
                index,
                self.settings.max_params,
            )
        return index

    def take(self) -> list[Any]:
        """Hand the stored values to the caller, ordered by placeholder index.

        Raises:
            BucketConsumedError: If the values were already taken.
        """
        if self._consumed:
            raise BucketConsumedError("take")
        values, self._values = self._values, []
        self._consumed = True
        logger.debug("Took %d bound parameter(s)", len(values))
        return values

    @property
    def consumed(self) -> bool:
        """True once :meth:`take` has been called."""
        return self._consumed

    def __len__(self) -> int:
        return len(self._values)
