"""
Declarative descriptors for dynamic query building.

A FieldsSpecification bundles the ordered filters, ordered sort keys and
pagination options for a single query build. All models are frozen: the
builders normalize copies and never touch caller input, so the same
specification can be built any number of times with identical output.

Example:
    >>> spec = FieldsSpecification(
    ...     filters=[
    ...         FieldSpec(name="age", source="t", operator="IN", value=[1, 2, 3]),
    ...         FieldSpec(name="name", value="ana", chaining_key="OR"),
    ...     ],
    ...     sorts=[SortSpec(name="name")],
    ...     pagination=Pagination(page=2, limit=10),
    ... )
"""

import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidContainmentValueError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Operator(str, Enum):
    """Comparison operators understood by the predicate assembler."""

    EQUALS = "="
    NOT_EQUALS = "<>"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    LIKE = "LIKE"
    ILIKE = "ILIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    BETWEEN = "BETWEEN"
    PARENTHESIS = "("


class ChainingKey(str, Enum):
    """Logical connective placed between two consecutive conditions."""

    AND = "AND"
    OR = "OR"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


class ContainmentKind(str, Enum):
    """Supported element kinds of an IN / NOT IN list."""

    UNSIGNED_INTS = "unsigned_ints"
    INTS = "ints"
    INT64S = "int64s"
    STRINGS = "strings"
    UUIDS = "uuids"
    DATES = "dates"


def _is_int(item: Any) -> bool:
    return isinstance(item, int) and not isinstance(item, bool)


def _check_unsigned(item: Any) -> Optional[str]:
    if not _is_int(item):
        return "expected an int"
    if item < 0:
        return "expected a non-negative int"
    return None


def _check_int(item: Any) -> Optional[str]:
    return None if _is_int(item) else "expected an int"


def _check_int64(item: Any) -> Optional[str]:
    if not _is_int(item):
        return "expected an int"
    if not INT64_MIN <= item <= INT64_MAX:
        return "outside the signed 64-bit range"
    return None


def _check_string(item: Any) -> Optional[str]:
    return None if isinstance(item, str) else "expected a str"


def _check_uuid(item: Any) -> Optional[str]:
    return None if isinstance(item, uuid.UUID) else "expected a uuid.UUID"


def _check_date(item: Any) -> Optional[str]:
    return None if isinstance(item, date) else "expected a date or datetime"


_CHECKS: dict[ContainmentKind, Callable[[Any], Optional[str]]] = {
    ContainmentKind.UNSIGNED_INTS: _check_unsigned,
    ContainmentKind.INTS: _check_int,
    ContainmentKind.INT64S: _check_int64,
    ContainmentKind.STRINGS: _check_string,
    ContainmentKind.UUIDS: _check_uuid,
    ContainmentKind.DATES: _check_date,
}


def _infer_item_kind(item: Any) -> Optional[ContainmentKind]:
    if _is_int(item):
        return ContainmentKind.INTS
    if isinstance(item, str):
        return ContainmentKind.STRINGS
    if isinstance(item, uuid.UUID):
        return ContainmentKind.UUIDS
    if isinstance(item, date):
        return ContainmentKind.DATES
    return None


@dataclass(frozen=True)
class ContainmentValues:
    """
    A homogeneous IN / NOT IN list tagged with its element kind.

    Build it with one of the per-kind constructors, which validate every
    item, or let ``infer`` classify a plain list.

    Attributes:
        kind: Element kind of every item
        items: Items in caller order
    """

    kind: ContainmentKind
    items: Tuple[Any, ...] = ()

    @classmethod
    def of(cls, kind: ContainmentKind, values: Iterable[Any]) -> "ContainmentValues":
        """Build a list of the given kind, raising InvalidContainmentValueError on a bad item."""
        kind = ContainmentKind(kind)
        items = tuple(values)
        check = _CHECKS[kind]
        for item in items:
            reason = check(item)
            if reason is not None:
                raise InvalidContainmentValueError(kind.value, item, reason)
        return cls(kind, items)

    @classmethod
    def unsigned_ints(cls, values: Iterable[int]) -> "ContainmentValues":
        return cls.of(ContainmentKind.UNSIGNED_INTS, values)

    @classmethod
    def ints(cls, values: Iterable[int]) -> "ContainmentValues":
        return cls.of(ContainmentKind.INTS, values)

    @classmethod
    def int64s(cls, values: Iterable[int]) -> "ContainmentValues":
        return cls.of(ContainmentKind.INT64S, values)

    @classmethod
    def strings(cls, values: Iterable[str]) -> "ContainmentValues":
        return cls.of(ContainmentKind.STRINGS, values)

    @classmethod
    def uuids(cls, values: Iterable[uuid.UUID]) -> "ContainmentValues":
        return cls.of(ContainmentKind.UUIDS, values)

    @classmethod
    def dates(cls, values: Iterable[date]) -> "ContainmentValues":
        return cls.of(ContainmentKind.DATES, values)

    @classmethod
    def infer(cls, value: Any) -> Optional["ContainmentValues"]:
        """
        Classify a raw list or tuple.

        Returns None when the value is not a list or tuple, is empty, or mixes
        element kinds or holds an unsupported element type. Never raises.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, (list, tuple)) or not value:
            return None

        kind = _infer_item_kind(value[0])
        if kind is None:
            return None
        if any(_infer_item_kind(item) is not kind for item in value[1:]):
            return None
        return cls(kind, tuple(value))


def is_ordered_sequence(value: Any) -> bool:
    """True for lists and tuples, the only collections accepted for filters and sorts."""
    return isinstance(value, (list, tuple))


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        return value.upper()
    return value


class FieldSpec(BaseModel):
    """
    One filter condition.

    Attributes:
        name: Column name, optionally table-qualified
        source: Table alias prefixed to name
        operator: Comparison operator; None means Equals
        value: Bound value, or the list compared by IN / NOT IN
        from_value: Lower bound for BETWEEN
        to_value: Upper bound for BETWEEN
        chaining_key: Connective to the next condition; None means AND
        group_open: Open a parenthesized group before this condition
        group_close: Close the innermost group after this condition
        is_value_from_table: Compare against another column instead of a value
        name_value_from_table: Column compared against when is_value_from_table
        source_name_value_from_table: Table alias prefixed to that column
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = ""
    source: str = ""
    operator: Optional[Operator] = None
    value: Any = None
    from_value: Any = None
    to_value: Any = None
    chaining_key: Optional[ChainingKey] = None
    group_open: bool = False
    group_close: bool = False
    is_value_from_table: bool = False
    name_value_from_table: str = ""
    source_name_value_from_table: str = ""

    @field_validator("operator", "chaining_key", mode="before")
    @classmethod
    def _normalize_keyword(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_cross_column_target(self) -> "FieldSpec":
        if self.is_value_from_table and not self.name_value_from_table:
            raise ValueError(
                f"Field '{self.name}' compares against another column "
                "but name_value_from_table is empty"
            )
        return self

    def missing_range_bounds(self) -> List[str]:
        """Names of the BETWEEN bounds that are not set."""
        missing = []
        if self.from_value is None:
            missing.append("from_value")
        if self.to_value is None:
            missing.append("to_value")
        return missing


class SortSpec(BaseModel):
    """One sort key; order None means ASC."""

    model_config = ConfigDict(frozen=True)

    name: str
    source: str = ""
    order: Optional[SortOrder] = None

    @field_validator("order", mode="before")
    @classmethod
    def _normalize_order(cls, value: Any) -> Any:
        return _blank_to_none(value)


class Pagination(BaseModel):
    """
    Paging options. Zero means unset for every field.

    Attributes:
        page: 1-based page number
        limit: Rows per page
        max_limit: Ceiling for limit; falls back to the configured default
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    max_limit: int = Field(default=0, ge=0)


class FieldsSpecification(BaseModel):
    """Ordered filters, ordered sorts and pagination for one query build."""

    model_config = ConfigDict(frozen=True)

    filters: List[FieldSpec] = Field(default_factory=list)
    sorts: List[SortSpec] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("filters", "sorts", mode="before")
    @classmethod
    def _require_ordered(cls, value: Any) -> Any:
        if value is not None and not is_ordered_sequence(value):
            raise ValueError(
                f"expected an ordered list or tuple, got {type(value).__name__}"
            )
        return value
