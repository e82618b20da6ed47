"""Pytest configuration and shared fixtures.

Logging is configured once per session so log events reach ``caplog`` as
JSON. Settings are cached by ``get_settings``; every test starts and ends with a
clean cache so environment overrides made through ``monkeypatch`` never leak
between tests.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Generator

import pytest

from pg_query_builder.config import get_settings
from pg_query_builder.infrastructure.sql import (
    FieldsSpecification,
    FieldSpec,
    Pagination,
    SortSpec,
)
from pg_query_builder.utils.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def json_logging() -> None:
    """Route structlog events through stdlib logging as JSON for caplog."""
    configure_logging()


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reset the cached Settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def customer_filters() -> list[FieldSpec]:
    """Mixed filters over an aliased customers table."""
    return [
        FieldSpec(name="name", source="c", value="ana"),
        FieldSpec(name="age", source="c", operator="BETWEEN", from_value=18, to_value=65),
        FieldSpec(name="country_id", source="c", operator="IN", value=[1, 2, 3]),
        FieldSpec(name="deleted_at", source="c", operator="IS NULL"),
        FieldSpec(name="score", source="c", operator=">=", value=10),
    ]


@pytest.fixture
def customer_specification(customer_filters: list[FieldSpec]) -> FieldsSpecification:
    """Specification combining filters, sorts and pagination."""
    return FieldsSpecification(
        filters=customer_filters,
        sorts=[SortSpec(name="name", source="c"), SortSpec(name="age", order="DESC")],
        pagination=Pagination(page=3, limit=20),
    )


@pytest.fixture
def sample_uuids() -> list[uuid.UUID]:
    return [
        uuid.UUID("6f1c1f0e-3f5b-4a45-9a36-1f5e4b1b2c01"),
        uuid.UUID("0b8a6c2d-7e4f-4d1a-8c3b-5a9e2f1d4c02"),
    ]


@pytest.fixture
def sample_dates() -> list[date]:
    return [date(2024, 1, 5), date(2024, 12, 25)]
