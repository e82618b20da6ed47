"""
SQL identifier handling utilities.

Column names in dynamic queries arrive unquoted and may carry a table alias.
These helpers attach aliases and produce the column references emitted into
WHERE and ORDER BY clauses.
"""

from typing import List, Optional


def qualify_column(name: str, source: Optional[str] = None) -> str:
    """
    Prefix a column name with its table alias.

    Examples:
        >>> qualify_column("age", "t")
        't.age'
        >>> qualify_column("age")
        'age'
    """
    if source:
        return f"{source}.{name}"
    return name


def column_reference(name: str) -> str:
    """
    Render a column reference for a predicate or sort key.

    Unquoted Postgres identifiers fold to lower case, so the reference is
    emitted lower-cased.

    Examples:
        >>> column_reference("U.CreatedAt")
        'u.createdat'
    """
    return name.lower()


def qualify_columns(columns: List[str], alias: str) -> List[str]:
    """
    Prefix every column in a list with the same alias.

    Examples:
        >>> qualify_columns(["name", "email"], "u")
        ['u.name', 'u.email']
    """
    return [qualify_column(column, alias) for column in columns]
