"""Database seeding for fixture tables."""

from .duckdb_seeder import DuckDBSeeder

__all__ = ["DuckDBSeeder"]
