"""LIMIT / OFFSET clause builder."""

from pg_query_builder.config import get_settings

from ..core.models import Pagination


def build_sql_pagination(pagination: Pagination) -> str:
    """
    Build a ``LIMIT n OFFSET m`` clause.

    A pagination with neither page nor limit set returns an empty string so
    every row is selected. Otherwise:
    - max_limit falls back to the configured default (100) when 0
    - limit falls back to max_limit when 0 and is clamped down to it
    - page falls back to 1 when 0

    Examples:
        >>> build_sql_pagination(Pagination(page=2, limit=10, max_limit=100))
        'LIMIT 10 OFFSET 10'
        >>> build_sql_pagination(Pagination())
        ''
    """
    if pagination.page == 0 and pagination.limit == 0:
        return ""

    max_limit = pagination.max_limit or get_settings().default_max_limit
    limit = pagination.limit
    if limit == 0 or limit > max_limit:
        limit = max_limit
    page = pagination.page or 1

    offset = (page - 1) * limit
    return f"LIMIT {limit} OFFSET {offset}"
