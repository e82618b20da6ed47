"""SQL statement and clause builders."""

from .compose import (
    build_query_and_args,
    build_query_args_and_pagination,
    build_query_args_and_pagination_with_sequence,
)
from .containment import build_in_not_in
from .insert import InsertBuilder, build_sql_insert, build_sql_insert_no_id
from .ordering import build_sql_order_by
from .pagination import build_sql_pagination
from .predicate import build_sql_where, build_sql_where_with_sequence
from .select import build_sql_select_fields, columns_aliased, columns_aliased_with_default
from .update import UpdateBuilder, build_sql_update_by, build_sql_update_by_id

__all__ = [
    "build_query_and_args",
    "build_query_args_and_pagination",
    "build_query_args_and_pagination_with_sequence",
    "build_in_not_in",
    "InsertBuilder",
    "build_sql_insert",
    "build_sql_insert_no_id",
    "build_sql_order_by",
    "build_sql_pagination",
    "build_sql_where",
    "build_sql_where_with_sequence",
    "build_sql_select_fields",
    "columns_aliased",
    "columns_aliased_with_default",
    "UpdateBuilder",
    "build_sql_update_by",
    "build_sql_update_by_id",
]
