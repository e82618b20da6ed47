"""
SQL UPDATE statement builders.

Every statement also sets ``updated_at = now()``. The identifying value is
bound to the placeholder that follows the last updated column.
"""

from typing import Any, List, Sequence, Tuple

from ..core.models import FieldSpec
from ..core.parameters import ParameterSequence
from ..dialects.base import Dialect
from ..dialects.postgresql import PostgreSQLDialect

UPDATED_AT_ASSIGNMENT = "updated_at = now()"

_UNSET = object()


class UpdateBuilder:
    """
    High-level builder for UPDATE statements.

    Example:
        >>> builder = UpdateBuilder(PostgreSQLDialect())
        >>> builder.update_by_id("users", ["name", "email"])
        'UPDATE users SET name = $1, email = $2, updated_at = now() WHERE id = $3'
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def _placeholders(self, count: int) -> List[str]:
        return ParameterSequence(render=self.dialect.placeholder).take(count)

    def _assignments(self, columns: List[str]) -> Tuple[List[str], str]:
        placeholders = self._placeholders(len(columns) + 1)
        assignments = [
            f"{column} = {placeholder}"
            for column, placeholder in zip(columns, placeholders)
        ]
        assignments.append(UPDATED_AT_ASSIGNMENT)
        return assignments, placeholders[-1]

    def update_by_id(self, table: str, columns: List[str]) -> str:
        """
        Build ``UPDATE ... WHERE id = $n``; empty columns give an empty string.

        Args:
            table: Table name
            columns: Columns to update, bound from ``$1``

        Returns:
            UPDATE SQL statement
        """
        if not columns:
            return ""
        assignments, key_placeholder = self._assignments(list(columns))
        return self.dialect.build_update(table, assignments, f"id = {key_placeholder}")

    def update_by(
        self,
        table: str,
        by_field: str,
        fields: Sequence[FieldSpec],
        by_value: Any = _UNSET,
    ) -> Tuple[str, List[Any]]:
        """
        Build ``UPDATE ... WHERE by_field = $n`` from fields carrying values.

        Args:
            table: Table name
            by_field: Column identifying the rows to update
            fields: Columns and their new values, in SET order
            by_value: Identifying value; appended as the last argument when given

        Returns:
            Tuple of (UPDATE SQL statement, arguments); ("", []) for no fields
        """
        if not fields:
            return "", []
        assignments, key_placeholder = self._assignments([f.name for f in fields])
        args = [f.value for f in fields]
        if by_value is not _UNSET:
            args.append(by_value)
        sql = self.dialect.build_update(
            table, assignments, f"{by_field} = {key_placeholder}"
        )
        return sql, args


_default_builder = UpdateBuilder(PostgreSQLDialect())


def build_sql_update_by_id(table: str, fields: List[str]) -> str:
    """PostgreSQL UPDATE keyed on ``id``."""
    return _default_builder.update_by_id(table, fields)


def build_sql_update_by(
    table: str, by_field: str, fields: Sequence[FieldSpec], by_value: Any = _UNSET
) -> Tuple[str, List[Any]]:
    """PostgreSQL UPDATE keyed on ``by_field`` with the new values as arguments."""
    return _default_builder.update_by(table, by_field, fields, by_value)
