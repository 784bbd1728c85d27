"""Database connection for the menu seeder."""

from menu_seed.database.duckdb_source import DuckDBSource

__all__ = ['DuckDBSource']
