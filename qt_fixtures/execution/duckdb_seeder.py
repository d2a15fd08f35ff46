"""DuckDB seeder for fixture tables."""

from __future__ import annotations

import logging
from typing import Any, List, Tuple

import duckdb

from ..renderer import qualified_sql_name, render_statements
from ..schemas import Layout, Table

logger = logging.getLogger(__name__)


class DuckDBSeeder:
    """Seed a DuckDB database from fixture tables.

    DuckDB has schemas rather than databases, so the fixture database is
    created as a schema of the same name.

    Usage:
        with DuckDBSeeder(":memory:") as db:
            db.seed(table)
            rows = db.fetch_rows(table)

    Args:
        database: Path to database file or ":memory:" for in-memory database.
    """

    def __init__(self, database: str = ":memory:"):
        self.database = database
        self._conn: duckdb.DuckDBPyConnection | None = None

    def connect(self) -> None:
        """Open connection to DuckDB."""
        if self._conn is not None:
            return  # Already connected
        self._conn = duckdb.connect(database=self.database)

    def close(self) -> None:
        """Close connection to DuckDB."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "DuckDBSeeder":
        """Context manager entry - opens connection."""
        self.connect()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes connection."""
        self.close()

    def _ensure_connected(self) -> duckdb.DuckDBPyConnection:
        """Ensure connection is open and return it."""
        if self._conn is None:
            self.connect()
        assert self._conn is not None
        return self._conn

    def seed(self, table: Table) -> int:
        """Create and fill the table, replacing any previous copy.

        Returns:
            Number of rows inserted.

        Raises:
            EmptyTableError: If the table has no columns or no rows.
        """
        statements = render_statements(table, layout=Layout.COMPACT, database_keyword="SCHEMA")
        conn = self._ensure_connected()
        for stmt in statements:
            conn.execute(stmt)
        logger.info("Seeded %s with %d rows", table.qualified_name, len(table.rows))
        return len(table.rows)

    def fetch_rows(self, table: Table) -> List[Tuple[str, ...]]:
        """Read a seeded table back, every cell cast to VARCHAR, in insertion order."""
        conn = self._ensure_connected()
        cols = ", ".join(f'CAST("{name}" AS VARCHAR)' for name in table.column_names)
        sql = f"SELECT {cols} FROM {qualified_sql_name(table)} ORDER BY rowid"
        return [tuple(row) for row in conn.execute(sql).fetchall()]

    def row_count(self, table: Table) -> int:
        conn = self._ensure_connected()
        return conn.execute(f"SELECT COUNT(*) FROM {qualified_sql_name(table)}").fetchone()[0]
