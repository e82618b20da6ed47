"""Core SQL utilities package."""

from .defaults import normalize_field, normalize_sort
from .errors import FailureKind, InvalidContainmentValueError, QueryBuildError
from .identifier import column_reference, qualify_column, qualify_columns
from .models import (
    ChainingKey,
    ContainmentKind,
    ContainmentValues,
    FieldsSpecification,
    FieldSpec,
    Operator,
    Pagination,
    SortOrder,
    SortSpec,
)
from .parameters import (
    GroupTracker,
    ParameterSequence,
    positional_placeholder,
)
from .results import BuildFailure, BuildResult, BuildSuccess

__all__ = [
    "normalize_field",
    "normalize_sort",
    "FailureKind",
    "InvalidContainmentValueError",
    "QueryBuildError",
    "column_reference",
    "qualify_column",
    "qualify_columns",
    "ChainingKey",
    "ContainmentKind",
    "ContainmentValues",
    "FieldsSpecification",
    "FieldSpec",
    "Operator",
    "Pagination",
    "SortOrder",
    "SortSpec",
    "GroupTracker",
    "ParameterSequence",
    "positional_placeholder",
    "BuildFailure",
    "BuildResult",
    "BuildSuccess",
]
