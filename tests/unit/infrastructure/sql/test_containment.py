"""
Unit tests for the IN / NOT IN encoder.
"""

import json
import logging
from datetime import date, datetime

import pytest

from pg_query_builder.infrastructure.sql.core.models import (
    ContainmentValues,
    FieldSpec,
    Operator,
)
from pg_query_builder.infrastructure.sql.operations.containment import (
    always_false_condition,
    build_in_not_in,
)


class TestBuildInNotIn:
    """Tests for literal list rendering per element kind."""

    def test_ints_with_alias(self):
        field = FieldSpec(name="age", source="t", value=[1, 2, 3])
        assert build_in_not_in(field, Operator.IN) == "t.age IN (1,2,3)"

    def test_not_in(self):
        field = FieldSpec(name="age", value=[4])
        assert build_in_not_in(field, Operator.NOT_IN) == "age NOT IN (4)"

    def test_unsigned_and_int64(self):
        unsigned = FieldSpec(name="n", value=ContainmentValues.unsigned_ints([0, 7]))
        int64 = FieldSpec(name="n", value=ContainmentValues.int64s([-(2**63), 2**63 - 1]))

        assert build_in_not_in(unsigned, Operator.IN) == "n IN (0,7)"
        assert build_in_not_in(int64, Operator.IN) == (
            "n IN (-9223372036854775808,9223372036854775807)"
        )

    def test_strings_quoted(self):
        field = FieldSpec(name="code", value=["a", "b"])
        assert build_in_not_in(field, Operator.IN) == "code IN ('a','b')"

    def test_strings_escape_quotes(self):
        field = FieldSpec(name="name", value=["o'neil"])
        assert build_in_not_in(field, Operator.IN) == "name IN ('o''neil')"

    def test_uuids_quoted(self, sample_uuids):
        field = FieldSpec(name="id", value=sample_uuids)
        assert build_in_not_in(field, Operator.IN) == (
            "id IN ('6f1c1f0e-3f5b-4a45-9a36-1f5e4b1b2c01',"
            "'0b8a6c2d-7e4f-4d1a-8c3b-5a9e2f1d4c02')"
        )

    def test_dates_truncated_without_padding(self, sample_dates):
        field = FieldSpec(name="day", value=sample_dates)
        assert build_in_not_in(field, Operator.IN) == "day IN ('2024-1-5','2024-12-25')"

    def test_datetime_drops_time(self):
        field = FieldSpec(name="day", value=[datetime(2023, 3, 9, 23, 59)])
        assert build_in_not_in(field, Operator.IN) == "day IN ('2023-3-9')"

    def test_order_preserved(self):
        field = FieldSpec(name="n", value=[3, 1, 2])
        assert build_in_not_in(field, Operator.IN) == "n IN (3,1,2)"

    def test_name_lower_cased(self):
        field = FieldSpec(name="Age", source="T", value=[1])
        assert build_in_not_in(field, Operator.IN) == "t.age IN (1)"

    def test_rejects_other_operators(self):
        with pytest.raises(ValueError):
            build_in_not_in(FieldSpec(name="a", value=[1]), Operator.EQUALS)


class TestAlwaysFalseFallback:
    """Tests for the fail-closed path."""

    @pytest.mark.parametrize(
        "value",
        [
            [],
            (),
            None,
            "1,2,3",
            [1, "2"],
            [1.0, 2.0],
            [date(2024, 1, 1), 1],
            ContainmentValues.strings([]),
        ],
    )
    def test_unusable_values(self, value):
        field = FieldSpec(name="age", source="t", value=value)
        assert build_in_not_in(field, Operator.IN) == "t.age = ''"
        assert build_in_not_in(field, Operator.NOT_IN) == "t.age = ''"

    def test_always_false_condition(self):
        assert always_false_condition("x") == "x = ''"

    def test_empty_list_logged(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING)
        build_in_not_in(FieldSpec(name="age", value=[]), Operator.IN)

        events = [json.loads(r.message) for r in caplog.records]
        fallback = [e for e in events if e.get("event") == "containment.fallback"]
        assert fallback
        assert fallback[-1]["reason"] == "empty"
        assert fallback[-1]["column"] == "age"
        assert fallback[-1]["level"] == "warning"

    def test_unsupported_value_logged(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.WARNING)
        build_in_not_in(FieldSpec(name="age", value=[1.5]), Operator.NOT_IN)

        events = [json.loads(r.message) for r in caplog.records]
        fallback = [e for e in events if e.get("event") == "containment.fallback"]
        assert fallback[-1]["reason"] == "unsupported"
        assert fallback[-1]["operator"] == "NOT IN"
