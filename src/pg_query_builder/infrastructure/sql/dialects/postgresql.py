"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL-specific syntax for positional placeholders, inline
literals, and the INSERT / UPDATE / SELECT statement shells.
"""

from typing import List

from ..core.parameters import positional_placeholder


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    def placeholder(self, index: int) -> str:
        """Positional placeholder ``$index``."""
        return positional_placeholder(index)

    def quote_literal(self, text: str) -> str:
        """Single-quote a string literal, doubling embedded quotes."""
        escaped = text.replace("'", "''")
        return f"'{escaped}'"

    def build_insert(
        self,
        table: str,
        columns: List[str],
        placeholders: List[str],
        returning: List[str],
    ) -> str:
        """
        Build an INSERT ... RETURNING statement.

        Args:
            table: Table name
            columns: List of column names
            placeholders: List of parameter placeholders
            returning: Columns listed after RETURNING

        Returns:
            INSERT SQL statement
        """
        cols = ",".join(columns)
        values = ",".join(placeholders)
        return (
            f"INSERT INTO {table} ({cols}) VALUES ({values}) "
            f"RETURNING {', '.join(returning)}"
        )

    def build_insert_default_values(self, table: str, returning: List[str]) -> str:
        """Build an INSERT that relies on column defaults only."""
        return f"INSERT INTO {table} DEFAULT VALUES RETURNING {', '.join(returning)}"

    def build_update(self, table: str, assignments: List[str], condition: str) -> str:
        """
        Build an UPDATE statement.

        Args:
            table: Table name
            assignments: ``column = expression`` items in SET order
            condition: WHERE condition without the keyword

        Returns:
            UPDATE SQL statement
        """
        return f"UPDATE {table} SET {', '.join(assignments)} WHERE {condition}"

    def build_select(self, table: str, columns: List[str]) -> str:
        """Build a plain column-list SELECT."""
        return f"SELECT {', '.join(columns)} FROM {table}"
