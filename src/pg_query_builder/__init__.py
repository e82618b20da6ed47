"""
pg-query-builder - Parameterized PostgreSQL query fragments.

Turns declarative filter, sort and pagination descriptors into SQL text with
positional ``$N`` placeholders and the ordered list of values to bind.
"""

__version__ = "0.1.0"
