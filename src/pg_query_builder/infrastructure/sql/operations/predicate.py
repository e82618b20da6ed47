"""
WHERE clause assembler.

Walks an ordered list of FieldSpec filters and produces the WHERE clause text
together with the values bound to its positional placeholders.

Rules applied per filter, in order:
- Defaults: blank operator is Equals, blank chaining key is AND.
- Aliases: ``source`` and ``source_name_value_from_table`` are folded into
  the column names.
- ``group_open`` prefixes the condition with ``(``; ``group_close`` appends
  ``)``. Groups still open after the last filter are closed there.
- IN / NOT IN, IS NULL / IS NOT NULL, cross-column comparisons and bare
  parentheses bind nothing. BETWEEN binds two values, every other operator
  binds one.
- The chaining key of each filter except the last is placed between it and
  the next condition. A bare parenthesis emits ``(`` directly in front of the
  following condition and contributes no chaining key. Trailing bare
  parentheses have no condition to enclose: they are dropped together with
  the chaining key before them.
"""

from typing import Any, List, Sequence

from pg_query_builder.utils.logging import get_logger

from ..core.defaults import normalize_field
from ..core.errors import FailureKind
from ..core.identifier import column_reference
from ..core.models import FieldSpec, Operator, is_ordered_sequence
from ..core.parameters import GroupTracker, ParameterSequence
from ..core.results import BuildFailure, BuildResult, BuildSuccess
from ..dialects.base import Dialect
from ..dialects.postgresql import PostgreSQLDialect
from .containment import build_in_not_in

logger = get_logger(__name__)

_DEFAULT_DIALECT = PostgreSQLDialect()


def build_sql_where(filters: Sequence[FieldSpec]) -> BuildResult:
    """
    Build a WHERE clause numbering placeholders from ``$1``.

    Args:
        filters: Ordered filter conditions

    Returns:
        BuildSuccess with the clause and its arguments (empty text and no
        arguments for no filters), or BuildFailure for a BETWEEN filter
        missing a bound

    Example:
        >>> build_sql_where([FieldSpec(name="name", value="ana")]).unwrap()
        ('WHERE name = $1', ['ana'])
    """
    return build_sql_where_with_sequence(filters, 1)


def build_sql_where_with_sequence(
    filters: Sequence[FieldSpec],
    param_sequence: int,
    dialect: Dialect = _DEFAULT_DIALECT,
) -> BuildResult:
    """
    Build a WHERE clause numbering placeholders from ``param_sequence``.

    Use this when the clause is appended to a statement that already binds
    ``param_sequence - 1`` values. ``dialect`` renders the placeholders and
    the IN / NOT IN literals.
    """
    if not is_ordered_sequence(filters):
        raise TypeError(
            f"filters must be an ordered list or tuple, got {type(filters).__name__}"
        )
    if not filters:
        return BuildSuccess("", [])

    sequence = ParameterSequence(param_sequence, render=dialect.placeholder)
    groups = GroupTracker()
    parts: List[str] = ["WHERE"]
    args: List[Any] = []
    pending_open = ""
    last_index = len(filters) - 1

    for index, raw_field in enumerate(filters):
        field = normalize_field(raw_field)
        operator = field.operator
        name = column_reference(field.name)

        condition = groups.open() if field.group_open else ""

        if operator in (Operator.IN, Operator.NOT_IN):
            condition += build_in_not_in(field, operator, dialect)
        elif operator in (Operator.IS_NULL, Operator.IS_NOT_NULL):
            condition += f"{name} {operator.value}"
        elif operator is Operator.BETWEEN:
            missing = field.missing_range_bounds()
            if missing:
                message = (
                    f"BETWEEN filter on '{field.name}' requires from_value and "
                    f"to_value; missing {', '.join(missing)}"
                )
                logger.warning(
                    "predicate.malformed_range",
                    column=field.name,
                    position=index,
                    missing=missing,
                )
                return BuildFailure(
                    FailureKind.MALFORMED_RANGE_FILTER, message, field_name=field.name
                )
            lower, upper = sequence.take(2)
            condition += f"{name} {operator.value} {lower} AND {upper}"
            args.extend([field.from_value, field.to_value])
        elif operator is Operator.PARENTHESIS:
            pass
        elif field.is_value_from_table:
            target = column_reference(field.name_value_from_table)
            condition += f"{name} {operator.value} {target}"
        else:
            (placeholder,) = sequence.take(1)
            condition += f"{name} {operator.value} {placeholder}"
            args.append(field.value)

        if field.group_close:
            closing = groups.close()
            if not closing:
                logger.warning(
                    "predicate.unmatched_group_close", column=field.name, position=index
                )
            condition += closing

        if operator is Operator.PARENTHESIS and index == last_index:
            _drop_trailing_parentheses(parts, pending_open + condition, groups)
            logger.warning("predicate.empty_group_dropped", position=index)
            break

        if index == last_index and groups.depth > 0:
            logger.info("predicate.groups_force_closed", open_groups=groups.depth)
            condition += groups.close_all()

        if operator is Operator.PARENTHESIS and index != last_index:
            pending_open += condition
            continue

        parts.append(pending_open + condition)
        pending_open = ""

        if index != last_index:
            parts.append(field.chaining_key.value)

    if len(parts) == 1:
        return BuildSuccess("", args)
    return BuildSuccess(" ".join(parts), args)


def _drop_trailing_parentheses(
    parts: List[str], trailing: str, groups: GroupTracker
) -> None:
    """
    Discard the bare parentheses that end a filter list.

    ``trailing`` holds only the parentheses emitted by those filters. Each one
    opened a group that encloses nothing, so those groups are forgotten. The
    chaining key left after the last condition is removed and the groups
    still open are closed on that condition.
    """
    groups.discard(trailing.count("(") - trailing.count(")"))

    if len(parts) == 1:
        groups.close_all()
        return
    parts.pop()
    parts[-1] += groups.close_all()
