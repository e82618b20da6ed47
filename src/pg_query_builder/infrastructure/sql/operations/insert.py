"""
SQL INSERT statement builders.

Placeholders follow column order. Tables with a caller-generated identifier
bind it first as ``$1``; tables with a database-generated identifier return
it instead.
"""

from typing import List

from ..core.parameters import ParameterSequence
from ..dialects.base import Dialect
from ..dialects.postgresql import PostgreSQLDialect

ID_COLUMN = "id"
CREATED_AT_COLUMN = "created_at"


class InsertBuilder:
    """
    High-level builder for INSERT statements.

    Example:
        >>> builder = InsertBuilder(PostgreSQLDialect())
        >>> builder.insert("users", ["name", "email"])
        'INSERT INTO users (id,name,email) VALUES ($1,$2,$3) RETURNING created_at'
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def _placeholders(self, count: int) -> List[str]:
        return ParameterSequence(render=self.dialect.placeholder).take(count)

    def insert(self, table: str, columns: List[str]) -> str:
        """
        Build an INSERT binding the identifier as ``$1`` and columns from ``$2``.

        Args:
            table: Table name
            columns: Column names, excluding the identifier

        Returns:
            INSERT SQL statement returning created_at
        """
        placeholders = self._placeholders(len(columns) + 1)
        return self.dialect.build_insert(
            table, [ID_COLUMN, *columns], placeholders, [CREATED_AT_COLUMN]
        )

    def insert_no_id(self, table: str, columns: List[str]) -> str:
        """
        Build an INSERT for a table whose identifier the database generates.

        Args:
            table: Table name
            columns: Column names

        Returns:
            INSERT SQL statement returning id and created_at
        """
        returning = [ID_COLUMN, CREATED_AT_COLUMN]
        if not columns:
            return self.dialect.build_insert_default_values(table, returning)
        placeholders = self._placeholders(len(columns))
        return self.dialect.build_insert(table, list(columns), placeholders, returning)


_default_builder = InsertBuilder(PostgreSQLDialect())


def build_sql_insert(table: str, fields: List[str]) -> str:
    """PostgreSQL INSERT with a caller-supplied ``id`` bound as ``$1``."""
    return _default_builder.insert(table, fields)


def build_sql_insert_no_id(table: str, fields: List[str]) -> str:
    """PostgreSQL INSERT returning the generated ``id``."""
    return _default_builder.insert_no_id(table, fields)
