"""Fixture renderer — serialize a Table to a creation script.

Statement order is fixed:
1. CREATE DATABASE IF NOT EXISTS
2. DROP TABLE IF EXISTS
3. CREATE TABLE (columns in declaration order)
4. One multi-row INSERT INTO ... VALUES (rows in insertion order)

Text cells are single-quoted verbatim. Embedded quotes are NOT escaped:
this renders fixtures, it is not a general-purpose SQL generator.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Union

from sqlglot.tokens import Tokenizer

from .config import get_settings
from .errors import EmptyTableError
from .schemas import Column, Layout, Row, Table

logger = logging.getLogger(__name__)

# every word the tokenizer reads as a keyword, including parts of "ORDER BY" etc.
_KEYWORD_WORDS = frozenset(word for keyword in Tokenizer.KEYWORDS for word in keyword.split())


def quote_identifier(name: str) -> str:
    """Double-quote a name that would otherwise read as a SQL keyword."""
    if name.upper() in _KEYWORD_WORDS:
        return f'"{name}"'
    return name


def qualified_sql_name(table: Table) -> str:
    return f"{quote_identifier(table.database)}.{quote_identifier(table.name)}"


def _format_cell(cell: str, column: Column) -> str:
    if column.is_numeric:
        return cell
    return f"'{cell}'"


def _format_row(row: Row, columns: tuple) -> str:
    return "(" + ", ".join(_format_cell(c, col) for c, col in zip(row, columns)) + ")"


def render_statements(
    table: Table,
    layout: Union[Layout, str, None] = None,
    database_keyword: str = "DATABASE",
    indent: Optional[int] = None,
) -> List[str]:
    """Render the four creation statements, without terminators.

    Args:
        table: Table to render.
        layout: PRETTY or COMPACT; defaults to the configured layout.
        database_keyword: "DATABASE", or "SCHEMA" for engines without databases.
        indent: Column indent for the PRETTY layout.

    Raises:
        EmptyTableError: If the table has no columns or no rows.
    """
    if not table.columns:
        raise EmptyTableError(f"Table {table.qualified_name} has no columns")
    if not table.rows:
        raise EmptyTableError(f"Table {table.qualified_name} has no rows")

    settings = get_settings()
    layout = Layout(layout or settings.layout)
    indent = settings.indent if indent is None else indent
    qualified = qualified_sql_name(table)

    col_defs = [f"{quote_identifier(c.name)} {c.sql_type}" for c in table.columns]
    rows = [_format_row(row, table.columns) for row in table.rows]

    if layout == Layout.PRETTY:
        pad = " " * indent
        create_table = f"CREATE TABLE {qualified} (\n" + ",\n".join(pad + d for d in col_defs) + ")"
        insert = f"INSERT INTO {qualified} VALUES\n" + ",\n".join(rows)
    else:
        create_table = f"CREATE TABLE {qualified} (" + ", ".join(col_defs) + ")"
        insert = f"INSERT INTO {qualified} VALUES " + ", ".join(rows)

    return [
        f"CREATE {database_keyword} IF NOT EXISTS {quote_identifier(table.database)}",
        f"DROP TABLE IF EXISTS {qualified}",
        create_table,
        insert,
    ]


def render_script(
    table: Table,
    layout: Union[Layout, str, None] = None,
    database_keyword: str = "DATABASE",
    indent: Optional[int] = None,
) -> str:
    """Render a Table to a creation script.

    Output is deterministic: the same Table always renders byte-identical text.

    Raises:
        EmptyTableError: If the table has no columns or no rows.
    """
    statements = render_statements(table, layout, database_keyword, indent)
    layout = Layout(layout or get_settings().layout)
    separator = "\n" if layout == Layout.PRETTY else " "
    script = separator.join(f"{stmt};" for stmt in statements)
    logger.debug(
        "Rendered %s: %d columns, %d rows, %d chars",
        table.qualified_name, len(table.columns), len(table.rows), len(script),
    )
    return script
