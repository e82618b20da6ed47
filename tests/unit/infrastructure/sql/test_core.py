"""
Unit tests for SQL core utilities: identifiers, parameters, defaults and results.
"""

import pytest

from pg_query_builder.infrastructure.sql.core.defaults import (
    normalize_field,
    normalize_sort,
    resolve_aliases,
    resolve_chaining_key,
    resolve_operator,
)
from pg_query_builder.infrastructure.sql.core.errors import (
    FailureKind,
    QueryBuildError,
)
from pg_query_builder.infrastructure.sql.core.identifier import (
    column_reference,
    qualify_column,
    qualify_columns,
)
from pg_query_builder.infrastructure.sql.core.models import (
    ChainingKey,
    FieldSpec,
    Operator,
    SortOrder,
    SortSpec,
)
from pg_query_builder.infrastructure.sql.core.parameters import (
    GroupTracker,
    ParameterSequence,
    positional_placeholder,
)
from pg_query_builder.infrastructure.sql.core.results import (
    BuildFailure,
    BuildSuccess,
)


class TestIdentifier:
    """Tests for column qualification helpers."""

    def test_qualify_with_source(self):
        """Alias should prefix the column."""
        assert qualify_column("age", "t") == "t.age"

    def test_qualify_without_source(self):
        """No alias leaves the column unchanged."""
        assert qualify_column("age") == "age"
        assert qualify_column("age", "") == "age"

    def test_column_reference_lower_cases(self):
        """References are emitted lower-cased."""
        assert column_reference("U.CreatedAt") == "u.createdat"

    def test_qualify_columns(self):
        """Every column gets the same alias, order kept."""
        assert qualify_columns(["b", "a"], "x") == ["x.b", "x.a"]


class TestParameters:
    """Tests for placeholder numbering."""

    def test_positional_placeholder(self):
        assert positional_placeholder(7) == "$7"

    def test_sequence_renders_through_callable(self):
        """Placeholder text comes from the supplied renderer."""
        sequence = ParameterSequence(2, render=lambda index: f":p{index}")
        assert sequence.take(2) == [":p2", ":p3"]
        assert sequence.take(0) == []

    def test_sequence_advances_by_taken_count(self):
        """Taking placeholders advances the counter consecutively."""
        sequence = ParameterSequence(4)
        assert sequence.take() == ["$4"]
        assert sequence.take(2) == ["$5", "$6"]
        assert sequence.next_index == 7

    def test_sequence_rejects_start_below_one(self):
        with pytest.raises(ValueError):
            ParameterSequence(0)


class TestGroupTracker:
    """Tests for group depth tracking."""

    def test_open_and_close(self):
        groups = GroupTracker()
        assert groups.open() == "("
        assert groups.open() == "("
        assert groups.depth == 2
        assert groups.close() == ")"
        assert groups.depth == 1

    def test_close_with_nothing_open(self):
        """Closing at depth zero emits nothing."""
        groups = GroupTracker()
        assert groups.close() == ""
        assert groups.depth == 0

    def test_discard_forgets_unemitted_groups(self):
        groups = GroupTracker()
        groups.open()
        groups.open()
        groups.discard(1)
        assert groups.close_all() == ")"
        groups.discard(3)
        assert groups.depth == 0

    def test_close_all(self):
        groups = GroupTracker()
        groups.open()
        groups.open()
        groups.open()
        assert groups.close_all() == ")))"
        assert groups.depth == 0
        assert groups.close_all() == ""


class TestDefaults:
    """Tests for filter and sort default resolution."""

    def test_blank_operator_becomes_equals(self):
        field = resolve_operator(FieldSpec(name="a", operator=""))
        assert field.operator is Operator.EQUALS

    def test_blank_chaining_key_becomes_and(self):
        field = resolve_chaining_key(FieldSpec(name="a", operator="="))
        assert field.chaining_key is ChainingKey.AND

    def test_explicit_chaining_key_kept(self):
        field = resolve_chaining_key(FieldSpec(name="a", chaining_key="or"))
        assert field.chaining_key is ChainingKey.OR

    def test_parenthesis_clears_chaining_key_and_opens_group(self):
        field = resolve_chaining_key(
            FieldSpec(name="", operator="(", chaining_key="OR")
        )
        assert field.chaining_key is None
        assert field.group_open is True

    def test_aliases_folded_into_names(self):
        field = resolve_aliases(
            FieldSpec(
                name="owner_id",
                source="o",
                is_value_from_table=True,
                name_value_from_table="id",
                source_name_value_from_table="u",
            )
        )
        assert field.name == "o.owner_id"
        assert field.name_value_from_table == "u.id"
        assert field.source == ""
        assert field.source_name_value_from_table == ""

    def test_normalize_does_not_mutate_input(self):
        """Caller input stays untouched."""
        original = FieldSpec(name="age", source="t")
        normalized = normalize_field(original)

        assert original.name == "age"
        assert original.source == "t"
        assert original.operator is None
        assert normalized.name == "t.age"
        assert normalized.operator is Operator.EQUALS

    def test_normalize_is_idempotent(self):
        once = normalize_field(FieldSpec(name="age", source="t", chaining_key="OR"))
        assert normalize_field(once) == once

    def test_normalize_sort(self):
        sort = normalize_sort(SortSpec(name="created_at", source="u"))
        assert sort.name == "u.created_at"
        assert sort.order is SortOrder.ASC

    def test_normalize_sort_keeps_desc(self):
        sort = normalize_sort(SortSpec(name="age", order="desc"))
        assert sort.order is SortOrder.DESC


class TestResults:
    """Tests for the discriminated build result."""

    def test_success_unwrap(self):
        result = BuildSuccess("WHERE a = $1", [1])
        assert result.ok is True
        assert result.unwrap() == ("WHERE a = $1", [1])

    def test_failure_unwrap_raises(self):
        result = BuildFailure(
            FailureKind.MALFORMED_RANGE_FILTER, "missing bound", field_name="age"
        )
        assert result.ok is False

        with pytest.raises(QueryBuildError) as exc_info:
            result.unwrap()

        assert exc_info.value.kind is FailureKind.MALFORMED_RANGE_FILTER
        assert exc_info.value.field_name == "age"
        assert exc_info.value.to_dict() == {
            "error_type": "QueryBuildError",
            "kind": "malformed_range_filter",
            "field_name": "age",
            "message": "missing bound",
        }
