"""SQL dialects."""

from .base import Dialect
from .postgresql import PostgreSQLDialect

__all__ = ["Dialect", "PostgreSQLDialect"]
