"""Errors raised while building, rendering or parsing fixtures.

All of them are construction/validation-time failures and none is retryable.
"""

from __future__ import annotations

from typing import Optional


class FixtureError(Exception):
    """Base class for fixture errors."""


class DuplicateColumnError(FixtureError):
    """Raised when a column name is defined twice."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Column already defined: {column!r}")


class InvalidEncodingError(FixtureError):
    """Raised when a sequence encoding is set on a non-text column."""

    def __init__(self, column: str, encoding: str, declared_type: str):
        self.column = column
        self.encoding = encoding
        self.declared_type = declared_type
        super().__init__(
            f"Column {column!r}: sequence encoding {encoding!r} "
            f"requires a text column, got {declared_type!r}"
        )


class ArityMismatchError(FixtureError):
    """Raised when a row does not carry exactly one value per column."""

    def __init__(
        self,
        expected: int,
        actual: int,
        row_index: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        if message is None:
            where = f"Row {row_index}" if row_index is not None else "Row"
            message = f"{where}: expected {expected} values, got {actual}"
        super().__init__(message)


class TypeMismatchError(FixtureError):
    """Raised when a value's literal form does not fit its column type."""

    def __init__(
        self,
        column: str,
        value: object,
        declared_type: str,
        row_index: Optional[int] = None,
    ):
        self.column = column
        self.value = value
        self.declared_type = declared_type
        self.row_index = row_index
        where = f"row {row_index}, " if row_index is not None else ""
        super().__init__(
            f"{where}column {column!r}: {value!r} is not a valid {declared_type} literal"
        )


class EmptyTableError(FixtureError):
    """Raised when rendering a table without rows or columns."""


class MalformedScriptError(FixtureError):
    """Raised when a creation script does not follow the fixture grammar."""

    def __init__(self, message: str, statement: str = ""):
        self.statement = statement
        if statement:
            message = f"{message}: {statement.strip()[:200]}"
        super().__init__(message)
