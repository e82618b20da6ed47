"""
Query composition.

Appends the WHERE, ORDER BY and LIMIT/OFFSET clauses produced from a
FieldsSpecification to a base statement, in that order. Empty clauses are
skipped and the remaining parts are joined by single spaces. Only the WHERE
clause contributes arguments.

Example:
    >>> spec = FieldsSpecification(
    ...     filters=[FieldSpec(name="active", value=True)],
    ...     sorts=[SortSpec(name="name")],
    ...     pagination=Pagination(page=1, limit=20),
    ... )
    >>> build_query_and_args("SELECT id, name FROM users", spec).unwrap()
    ('SELECT id, name FROM users WHERE active = $1 ORDER BY name ASC LIMIT 20 OFFSET 0', [True])
"""

from pg_query_builder.utils.logging import bind_context

from ..core.models import FieldsSpecification
from ..core.results import BuildFailure, BuildResult, BuildSuccess
from .ordering import build_sql_order_by
from .pagination import build_sql_pagination
from .predicate import build_sql_where_with_sequence


def join_clauses(*clauses: str) -> str:
    """Join non-empty clauses with single spaces."""
    return " ".join(clause.strip() for clause in clauses if clause and clause.strip())


def build_query_and_args(
    initial_sql: str, specification: FieldsSpecification
) -> BuildResult:
    """Append filters, sorts and pagination to ``initial_sql``, numbering from ``$1``."""
    return build_query_args_and_pagination_with_sequence(initial_sql, specification, 1)


def build_query_args_and_pagination(
    initial_sql: str, specification: FieldsSpecification
) -> BuildResult:
    """Same as build_query_and_args."""
    return build_query_args_and_pagination_with_sequence(initial_sql, specification, 1)


def build_query_args_and_pagination_with_sequence(
    initial_sql: str,
    specification: FieldsSpecification,
    init_sequence_filters: int,
) -> BuildResult:
    """
    Append filters, sorts and pagination to ``initial_sql``.

    Args:
        initial_sql: Base statement, e.g. a SELECT without WHERE
        specification: Filters, sorts and pagination to apply
        init_sequence_filters: Number of the first placeholder used by the
            filters, so they can follow placeholders already in initial_sql

    Returns:
        BuildSuccess with the full query and the filter arguments, or the
        BuildFailure reported by the WHERE clause builder
    """
    log = bind_context(__name__, first_placeholder=init_sequence_filters)
    where = build_sql_where_with_sequence(specification.filters, init_sequence_filters)
    if isinstance(where, BuildFailure):
        log.debug("query.aborted", kind=where.kind.value, field_name=where.field_name)
        return where

    query = join_clauses(
        initial_sql,
        where.text,
        build_sql_order_by(specification.sorts),
        build_sql_pagination(specification.pagination),
    )
    log.debug(
        "query.composed",
        filters=len(specification.filters),
        sorts=len(specification.sorts),
        arguments=len(where.args),
    )
    return BuildSuccess(query, list(where.args))
