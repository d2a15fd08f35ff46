"""Fixture parser — recover a Table from a creation script.

Uses sqlglot to parse each statement, then walks the statements once,
strictly forward:

    AWAIT_DATABASE --CREATE DATABASE--> AWAIT_TABLE
    AWAIT_TABLE    --DROP TABLE-------> AWAIT_TABLE (at most once)
    AWAIT_TABLE    --CREATE TABLE-----> AWAIT_INSERT
    AWAIT_INSERT   --INSERT-----------> DONE

Anything else is rejected, never reordered. Cells come back as raw strings;
sequence encodings are not interpreted here.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple, Union

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError, TokenError

from .config import get_settings
from .errors import FixtureError, MalformedScriptError
from .schema_spec import SchemaSpec
from .schemas import DeclaredType, ParsedStatement, SequenceEncoding, StatementKind, Table

logger = logging.getLogger(__name__)


class ParseState(Enum):
    AWAIT_DATABASE = "await_database"
    AWAIT_TABLE = "await_table"
    AWAIT_INSERT = "await_insert"
    DONE = "done"


SQL_TYPE_TO_DECLARED: Dict[exp.DataType.Type, DeclaredType] = {
    exp.DataType.Type.FLOAT: DeclaredType.FLOAT,
    exp.DataType.Type.TEXT: DeclaredType.TEXT,
    exp.DataType.Type.INT: DeclaredType.INT,
}


# ── Statement splitting ────────────────────────────────────────────────


def split_statements(script: str) -> List[str]:
    """Split a script on semicolons that sit outside single-quoted literals."""
    statements: List[str] = []
    buf: List[str] = []
    in_quote = False
    for ch in script:
        if ch == "'":
            in_quote = not in_quote
        elif ch == ";" and not in_quote:
            stmt = "".join(buf).strip()
            if stmt:
                statements.append(stmt)
            buf = []
            continue
        buf.append(ch)
    tail = "".join(buf).strip()
    if tail:
        statements.append(tail)
    return statements


def _classify_statement(ast: exp.Expression) -> StatementKind:
    if isinstance(ast, exp.Create):
        kind_str = str(ast.args.get("kind", "")).upper()
        if kind_str in ("DATABASE", "SCHEMA"):
            return StatementKind.CREATE_DATABASE
        if kind_str == "TABLE" and ast.args.get("expression") is None:
            return StatementKind.CREATE_TABLE
        return StatementKind.OTHER
    if isinstance(ast, exp.Drop):
        if str(ast.args.get("kind", "")).upper() == "TABLE":
            return StatementKind.DROP_TABLE
        return StatementKind.OTHER
    if isinstance(ast, exp.Insert):
        return StatementKind.INSERT
    return StatementKind.OTHER


def parse_statements(script: str, dialect: Optional[str] = None) -> List[ParsedStatement]:
    """Parse and classify every statement of a script.

    Raises:
        MalformedScriptError: If sqlglot cannot parse a statement.
    """
    if dialect is None:
        dialect = get_settings().dialect
    parsed = []
    for idx, sql_text in enumerate(split_statements(script)):
        try:
            ast = sqlglot.parse_one(sql_text, dialect=dialect or None)
        except (ParseError, TokenError) as e:
            raise MalformedScriptError(f"Unparseable statement ({e})", sql_text) from e
        parsed.append(
            ParsedStatement(index=idx, kind=_classify_statement(ast), sql_text=sql_text, ast=ast)
        )
    return parsed


# ── Statement readers ──────────────────────────────────────────────────


def _part(node: exp.Expression, key: str) -> str:
    """Name held in one slot of a Table node, or "" when the slot is empty."""
    value = node.args.get(key)
    return value.name if isinstance(value, exp.Expression) else ""


def _target_table(stmt: ParsedStatement) -> Optional[exp.Expression]:
    """The single table a DROP or INSERT targets.

    Depending on the sqlglot release, DROP keeps its target in ``this`` or in
    a ``tables`` list.
    """
    tables = stmt.ast.args.get("tables")
    if tables:
        if len(tables) != 1:
            raise MalformedScriptError("Expected a single target table", stmt.sql_text)
        return tables[0]
    return stmt.ast.this


def _qualified_parts(table: Optional[exp.Expression], stmt: ParsedStatement) -> Tuple[str, str]:
    """Return (database, table) for a db.table reference."""
    if not isinstance(table, exp.Table) or _part(table, "catalog"):
        raise MalformedScriptError("Expected a database-qualified table name", stmt.sql_text)
    db, name = _part(table, "db"), _part(table, "this")
    if not db or not name:
        raise MalformedScriptError("Expected a database-qualified table name", stmt.sql_text)
    return db, name


def _read_database(stmt: ParsedStatement) -> str:
    target = stmt.ast.this
    if isinstance(target, exp.Schema):
        target = target.this
    if isinstance(target, exp.Identifier):
        return target.name
    if not isinstance(target, exp.Table):
        raise MalformedScriptError("Expected a database name", stmt.sql_text)
    # CREATE SCHEMA puts the name in the db slot, CREATE DATABASE in the name slot
    names = [n for n in (_part(target, "this"), _part(target, "db")) if n]
    if len(names) != 1 or _part(target, "catalog"):
        raise MalformedScriptError("Expected a single database name", stmt.sql_text)
    return names[0]


def _read_columns(stmt: ParsedStatement) -> List[Tuple[str, DeclaredType]]:
    schema = stmt.ast.this
    if not isinstance(schema, exp.Schema) or not schema.expressions:
        raise MalformedScriptError("CREATE TABLE without a column list", stmt.sql_text)

    columns = []
    for coldef in schema.expressions:
        if not isinstance(coldef, exp.ColumnDef) or coldef.args.get("constraints"):
            raise MalformedScriptError(f"Unsupported column definition {coldef.sql()!r}", stmt.sql_text)
        kind = coldef.args.get("kind")
        declared = SQL_TYPE_TO_DECLARED.get(kind.this) if isinstance(kind, exp.DataType) else None
        if declared is None:
            raise MalformedScriptError(f"Unsupported type for column {coldef.name!r}", stmt.sql_text)
        columns.append((coldef.name, declared))
    return columns


def _cell_text(node: exp.Expression, stmt: ParsedStatement) -> str:
    if isinstance(node, exp.Literal):
        return node.this
    if isinstance(node, exp.Neg) and isinstance(node.this, exp.Literal) and node.this.is_number:
        return f"-{node.this.this}"
    raise MalformedScriptError(f"Unsupported cell value {node.sql()!r}", stmt.sql_text)


def _read_rows(stmt: ParsedStatement, arity: int) -> List[Tuple[str, ...]]:
    values = stmt.ast.expression
    if not isinstance(values, exp.Values) or not values.expressions:
        raise MalformedScriptError("INSERT without a VALUES list", stmt.sql_text)

    rows = []
    for row_index, tup in enumerate(values.expressions):
        cells = tup.expressions if isinstance(tup, exp.Tuple) else [tup]
        if len(cells) != arity:
            raise MalformedScriptError(
                f"Row {row_index} has {len(cells)} values, table has {arity} columns",
                stmt.sql_text,
            )
        rows.append(tuple(_cell_text(c, stmt) for c in cells))
    return rows


def _lookup_encoding(
    encodings: Mapping[str, Union[SequenceEncoding, str]], name: str
) -> SequenceEncoding:
    for key, value in encodings.items():
        if key.lower() == name.lower():
            return SequenceEncoding(value)
    return SequenceEncoding.NONE


# ── Public API ─────────────────────────────────────────────────────────


def parse_script(
    script: str,
    encodings: Optional[Mapping[str, Union[SequenceEncoding, str]]] = None,
    dialect: Optional[str] = None,
) -> Table:
    """Parse a creation script back into a Table.

    Args:
        script: Script in the rendered fixture grammar.
        encodings: Sequence encodings to attach, by column name. SQL does not
            carry them; pass ``table.encodings()`` for an exact round trip.
        dialect: sqlglot dialect; defaults to the configured one.

    Raises:
        MalformedScriptError: On any statement outside the grammar, out of
            order, or an INSERT whose row arity disagrees with CREATE TABLE.
    """
    encodings = encodings or {}
    state = ParseState.AWAIT_DATABASE
    database: Optional[str] = None
    table_name: Optional[str] = None
    columns: List[Tuple[str, DeclaredType]] = []
    rows: List[Tuple[str, ...]] = []
    seen_drop = False
    last_sql = ""

    for stmt in parse_statements(script, dialect):
        last_sql = stmt.sql_text
        kind = stmt.kind

        if state == ParseState.AWAIT_DATABASE and kind == StatementKind.CREATE_DATABASE:
            database = _read_database(stmt)
            state = ParseState.AWAIT_TABLE

        elif state == ParseState.AWAIT_TABLE and kind == StatementKind.DROP_TABLE and not seen_drop:
            db, _ = _qualified_parts(_target_table(stmt), stmt)
            if db != database:
                raise MalformedScriptError(f"DROP TABLE outside database {database!r}", stmt.sql_text)
            seen_drop = True

        elif state == ParseState.AWAIT_TABLE and kind == StatementKind.CREATE_TABLE:
            columns = _read_columns(stmt)
            db, table_name = _qualified_parts(stmt.ast.this.this, stmt)
            if db != database:
                raise MalformedScriptError(f"CREATE TABLE outside database {database!r}", stmt.sql_text)
            state = ParseState.AWAIT_INSERT

        elif state == ParseState.AWAIT_INSERT and kind == StatementKind.INSERT:
            if (database, table_name) != _qualified_parts(_target_table(stmt), stmt):
                raise MalformedScriptError(
                    f"INSERT does not target {database}.{table_name}", stmt.sql_text
                )
            rows = _read_rows(stmt, len(columns))
            state = ParseState.DONE

        else:
            raise MalformedScriptError(
                f"Unexpected {kind.value} statement while in state {state.value}", stmt.sql_text
            )

        logger.debug("Statement %d (%s) -> %s", stmt.index, kind.value, state.value)

    if state != ParseState.DONE:
        raise MalformedScriptError(f"Script ended in state {state.value}", last_sql)

    try:
        spec = SchemaSpec(database, table_name)
        for name, declared in columns:
            spec.define_column(name, declared, _lookup_encoding(encodings, name))
        spec.add_rows(rows)
    except (FixtureError, ValueError) as e:
        raise MalformedScriptError(str(e), last_sql) from e

    table = spec.build()
    logger.debug("Parsed %s: %d columns, %d rows", table.qualified_name, len(columns), len(rows))
    return table
