"""Custom exception hierarchy for pgquery.

All public errors inherit from PgQueryError so callers can catch the base
class for any pgquery-specific failure.  Every error here signals a
programming mistake in the calling code; driver and connection failures
are raised by the driver itself.
"""
from __future__ import annotations


class PgQueryError(Exception):
    """Base exception for all pgquery errors."""


class BucketConsumedError(PgQueryError):
    """Raised when a parameter bucket is used after its values were taken.

    Args:
        operation: The bucket operation that was attempted (``push``/``take``).
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot {operation}: bucket already consumed. "
            "Parameters can only be taken once per builder."
        )
        self.operation = operation


class UnsupportedValueError(PgQueryError, TypeError):
    """Raised when a value cannot be bound as a statement parameter.

    Either the value cannot be copied into the bucket, or the clause it is
    bound to needs a specific type (``LIMIT`` and ``OFFSET`` take ``int``).

    Args:
        value_type: The offending Python type.
        clause: The clause that rejected the value, empty for a plain push.
    """

    def __init__(self, value_type: type, clause: str = "") -> None:
        where = f" for {clause}" if clause else ""
        super().__init__(
            f"Unsupported bind value type '{value_type.__name__}'{where}."
        )
        self.value_type = value_type
        self.clause = clause


class PagingAlreadySetError(PgQueryError):
    """Raised when LIMIT or OFFSET is set twice on a strict builder.

    Only raised when ``BuilderSettings.strict_paging`` is enabled; otherwise
    the second call wins and the first parameter stays in the bucket unused.

    Args:
        clause: ``'LIMIT'`` or ``'OFFSET'``.
        placeholder: The placeholder already rendered for the clause.
    """

    def __init__(self, clause: str, placeholder: str) -> None:
        super().__init__(
            f"{clause} is already set to {placeholder}; "
            "strict_paging forbids setting it twice."
        )
        self.clause = clause
        self.placeholder = placeholder
