"""
SQL module for dynamic query generation.

Builds Postgres statements and WHERE / ORDER BY / LIMIT clauses with
positional ``$N`` placeholders from declarative filter, sort and pagination
descriptors. Nothing here executes SQL.
"""

from .core import (
    BuildFailure,
    BuildResult,
    BuildSuccess,
    ChainingKey,
    ContainmentKind,
    ContainmentValues,
    FailureKind,
    FieldsSpecification,
    FieldSpec,
    InvalidContainmentValueError,
    Operator,
    Pagination,
    QueryBuildError,
    SortOrder,
    SortSpec,
)
from .dialects import PostgreSQLDialect
from .operations import (
    InsertBuilder,
    UpdateBuilder,
    build_in_not_in,
    build_query_and_args,
    build_query_args_and_pagination,
    build_query_args_and_pagination_with_sequence,
    build_sql_insert,
    build_sql_insert_no_id,
    build_sql_order_by,
    build_sql_pagination,
    build_sql_select_fields,
    build_sql_update_by,
    build_sql_update_by_id,
    build_sql_where,
    build_sql_where_with_sequence,
    columns_aliased,
    columns_aliased_with_default,
)

__all__ = [
    "BuildFailure",
    "BuildResult",
    "BuildSuccess",
    "ChainingKey",
    "ContainmentKind",
    "ContainmentValues",
    "FailureKind",
    "FieldsSpecification",
    "FieldSpec",
    "InvalidContainmentValueError",
    "Operator",
    "Pagination",
    "QueryBuildError",
    "SortOrder",
    "SortSpec",
    "PostgreSQLDialect",
    "InsertBuilder",
    "UpdateBuilder",
    "build_in_not_in",
    "build_query_and_args",
    "build_query_args_and_pagination",
    "build_query_args_and_pagination_with_sequence",
    "build_sql_insert",
    "build_sql_insert_no_id",
    "build_sql_order_by",
    "build_sql_pagination",
    "build_sql_select_fields",
    "build_sql_update_by",
    "build_sql_update_by_id",
    "build_sql_where",
    "build_sql_where_with_sequence",
    "columns_aliased",
    "columns_aliased_with_default",
]
