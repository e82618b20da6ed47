"""Configuration management for pg-query-builder.

Usage:
    >>> from pg_query_builder.config import get_settings
    >>> settings = get_settings()
    >>> settings.default_max_limit
    100
"""

from pg_query_builder.config.settings import DEFAULT_MAX_LIMIT, Settings, get_settings

__all__ = [
    "DEFAULT_MAX_LIMIT",
    "Settings",
    "get_settings",
]
