"""Data models for SQL test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# ── Enums ──────────────────────────────────────────────────────────────


class DeclaredType(str, Enum):
    """Scalar type a column is declared with."""

    FLOAT = "float"
    TEXT = "text"
    INT = "int"


class SequenceEncoding(str, Enum):
    """How a text column's delimited values are meant to be read.

    Advisory only: the downstream feature-derivation engine decodes them.
    """

    NONE = "none"
    COMMA_SEPARATED_INTS = "comma-separated-ints"
    COMMA_SEPARATED_FLOATS = "comma-separated-floats"
    COMMA_SEPARATED_MIXED = "comma-separated-mixed"


class StatementKind(Enum):
    CREATE_DATABASE = "create_database"
    DROP_TABLE = "drop_table"
    CREATE_TABLE = "create_table"
    INSERT = "insert"
    OTHER = "other"


class Layout(str, Enum):
    """Rendering layout for creation scripts."""

    PRETTY = "pretty"  # one column / row per line, as checked-in fixtures read
    COMPACT = "compact"  # whole script on a single line


# declared type -> SQL column type, spelled as the checked-in fixtures spell it
SQL_TYPES: Dict[DeclaredType, str] = {
    DeclaredType.FLOAT: "float",
    DeclaredType.TEXT: "TEXT",
    DeclaredType.INT: "int",
}


# ── Table model ────────────────────────────────────────────────────────


Row = Tuple[str, ...]


@dataclass(frozen=True)
class Column:
    """A single column declaration."""

    name: str
    declared_type: DeclaredType
    sequence_encoding: SequenceEncoding = SequenceEncoding.NONE

    @property
    def sql_type(self) -> str:
        return SQL_TYPES[self.declared_type]

    @property
    def is_numeric(self) -> bool:
        return self.declared_type in (DeclaredType.FLOAT, DeclaredType.INT)

    @property
    def is_sequence(self) -> bool:
        return self.sequence_encoding != SequenceEncoding.NONE


@dataclass(frozen=True)
class Table:
    """Immutable fixture table: columns plus raw-string rows.

    Every row holds exactly one raw cell string per column, in column order.
    """

    database: str
    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    rows: Tuple[Row, ...] = field(default_factory=tuple)

    @property
    def qualified_name(self) -> str:
        return f"{self.database}.{self.name}"

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Column:
        """Look up a column by name (case-insensitive)."""
        for col in self.columns:
            if col.name.lower() == name.lower():
                return col
        raise KeyError(name)

    def encodings(self) -> Dict[str, SequenceEncoding]:
        """Sequence encodings of the encoded columns, keyed by column name."""
        return {c.name: c.sequence_encoding for c in self.columns if c.is_sequence}

    def column_values(self, name: str) -> List[str]:
        col = self.column(name)
        idx = self.columns.index(col)
        return [row[idx] for row in self.rows]

    def to_records(self) -> List[Dict[str, str]]:
        names = self.column_names
        return [dict(zip(names, row)) for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "database": self.database,
            "table": self.name,
            "columns": [
                {
                    "name": c.name,
                    "declared_type": c.declared_type.value,
                    "sequence_encoding": c.sequence_encoding.value,
                }
                for c in self.columns
            ],
            "rows": [list(row) for row in self.rows],
        }


@dataclass
class ParsedStatement:
    """One statement of a creation script, classified."""

    index: int
    kind: StatementKind
    sql_text: str
    ast: Optional[Any] = field(default=None, repr=False)
