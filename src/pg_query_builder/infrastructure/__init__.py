"""
Infrastructure Layer

Components:
- sql: Filter/sort/pagination models, clause builders and statement templates

Usage:
    from pg_query_builder.infrastructure.sql import FieldSpec, build_sql_where
"""

__all__: list[str] = []
