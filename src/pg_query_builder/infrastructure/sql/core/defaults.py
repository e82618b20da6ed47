"""
Default resolution for filter and sort descriptors.

Each helper returns a new descriptor; caller input is never modified.
Normalizing an already normalized descriptor returns an equal one.
"""

from .identifier import qualify_column
from .models import ChainingKey, FieldSpec, Operator, SortOrder, SortSpec


def resolve_operator(field: FieldSpec) -> FieldSpec:
    """Blank operator means Equals."""
    if field.operator is None:
        return field.model_copy(update={"operator": Operator.EQUALS})
    return field


def resolve_chaining_key(field: FieldSpec) -> FieldSpec:
    """Blank chaining key means AND; a bare parenthesis carries none."""
    if field.operator is Operator.PARENTHESIS:
        return field.model_copy(update={"chaining_key": None, "group_open": True})
    if field.chaining_key is None:
        return field.model_copy(update={"chaining_key": ChainingKey.AND})
    return field


def resolve_aliases(field: FieldSpec) -> FieldSpec:
    """Fold table aliases into the column names."""
    update = {}
    if field.source:
        update["name"] = qualify_column(field.name, field.source)
        update["source"] = ""
    if field.source_name_value_from_table:
        update["name_value_from_table"] = qualify_column(
            field.name_value_from_table, field.source_name_value_from_table
        )
        update["source_name_value_from_table"] = ""
    if not update:
        return field
    return field.model_copy(update=update)


def normalize_field(field: FieldSpec) -> FieldSpec:
    """Apply every filter default in order."""
    field = resolve_operator(field)
    field = resolve_chaining_key(field)
    return resolve_aliases(field)


def normalize_sort(sort: SortSpec) -> SortSpec:
    """Blank order means ASC; the alias is folded into the name."""
    update = {}
    if sort.order is None:
        update["order"] = SortOrder.ASC
    if sort.source:
        update["name"] = qualify_column(sort.name, sort.source)
        update["source"] = ""
    if not update:
        return sort
    return sort.model_copy(update=update)
