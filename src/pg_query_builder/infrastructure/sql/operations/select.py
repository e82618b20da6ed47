"""SELECT statement and aliased column list builders."""

from typing import List

from ..core.identifier import qualify_column, qualify_columns
from ..dialects.postgresql import PostgreSQLDialect

_dialect = PostgreSQLDialect()


def build_sql_select_fields(table: str, fields: List[str]) -> str:
    """
    Build ``SELECT a, b FROM table``; empty fields give an empty string.

    Examples:
        >>> build_sql_select_fields("users", ["id", "name"])
        'SELECT id, name FROM users'
    """
    if not fields:
        return ""
    return _dialect.build_select(table, list(fields))


def columns_aliased(fields: List[str], aliased: str) -> str:
    """
    List columns under an alias, framed by the audit columns.

    ``alias.id`` comes first and ``alias.created_at, alias.updated_at`` last.

    Examples:
        >>> columns_aliased(["name", "email"], "u")
        'u.id, u.name, u.email, u.created_at, u.updated_at'
    """
    if not fields:
        return ""
    columns = [
        qualify_column("id", aliased),
        *qualify_columns(list(fields), aliased),
        qualify_column("created_at", aliased),
        qualify_column("updated_at", aliased),
    ]
    return ", ".join(columns)


def columns_aliased_with_default(fields: List[str], aliased: str) -> str:
    """Same output as columns_aliased."""
    return columns_aliased(fields, aliased)
