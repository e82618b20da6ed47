"""
IN / NOT IN condition encoder.

Containment lists are embedded as SQL literals rather than bound parameters,
so only values from trusted, already validated sources may be passed here.
An empty list or a value that is not a supported homogeneous list renders
``column = ''``, a condition that matches no row.
"""

from typing import Any, Callable, Dict

from pg_query_builder.utils.logging import get_logger

from ..core.identifier import column_reference, qualify_column
from ..core.models import ContainmentKind, ContainmentValues, FieldSpec, Operator
from ..dialects.base import Dialect
from ..dialects.postgresql import PostgreSQLDialect

logger = get_logger(__name__)

_DEFAULT_DIALECT = PostgreSQLDialect()


def _format_number(item: int, dialect: Dialect) -> str:
    return str(item)


def _format_text(item: Any, dialect: Dialect) -> str:
    return dialect.quote_literal(str(item))


def _format_date(item: Any, dialect: Dialect) -> str:
    # Time of day is dropped; month and day are not zero padded
    return dialect.quote_literal(f"{item.year}-{item.month}-{item.day}")


_FORMATTERS: Dict[ContainmentKind, Callable[[Any, Dialect], str]] = {
    ContainmentKind.UNSIGNED_INTS: _format_number,
    ContainmentKind.INTS: _format_number,
    ContainmentKind.INT64S: _format_number,
    ContainmentKind.STRINGS: _format_text,
    ContainmentKind.UUIDS: _format_text,
    ContainmentKind.DATES: _format_date,
}


def always_false_condition(column: str) -> str:
    """Condition used in place of an unusable containment list."""
    return f"{column} = ''"


def build_in_not_in(
    field: FieldSpec,
    operator: Operator,
    dialect: Dialect = _DEFAULT_DIALECT,
) -> str:
    """
    Render ``column IN (...)`` or ``column NOT IN (...)`` for a filter.

    Args:
        field: Filter whose value holds the list
        operator: Operator.IN or Operator.NOT_IN
        dialect: Dialect used to quote literals

    Returns:
        Condition text without a leading WHERE

    Examples:
        >>> build_in_not_in(FieldSpec(name="age", source="t", value=[1, 2, 3]), Operator.IN)
        't.age IN (1,2,3)'
        >>> build_in_not_in(FieldSpec(name="age", value=[]), Operator.IN)
        "age = ''"
    """
    if operator not in (Operator.IN, Operator.NOT_IN):
        raise ValueError(f"Containment requires IN or NOT IN, got {operator.value}")

    column = column_reference(qualify_column(field.name, field.source))
    values = ContainmentValues.infer(field.value)

    if values is None:
        is_empty = isinstance(field.value, (list, tuple)) and not field.value
        logger.warning(
            "containment.fallback",
            column=column,
            operator=operator.value,
            reason="empty" if is_empty else "unsupported",
            value_type=type(field.value).__name__,
        )
        return always_false_condition(column)

    if not values.items:
        logger.warning(
            "containment.fallback",
            column=column,
            operator=operator.value,
            reason="empty",
            value_type=values.kind.value,
        )
        return always_false_condition(column)

    formatter = _FORMATTERS[values.kind]
    literals = ",".join(formatter(item, dialect) for item in values.items)
    return f"{column} {operator.value} ({literals})"
