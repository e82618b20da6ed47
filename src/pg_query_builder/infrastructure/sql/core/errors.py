"""Exceptions raised while describing or building SQL fragments."""

from enum import Enum
from typing import Any, Dict, Optional


class FailureKind(str, Enum):
    """Kinds of expected build failures reported through BuildFailure."""

    MALFORMED_RANGE_FILTER = "malformed_range_filter"


class QueryBuildError(Exception):
    """Raised when a failed build result is unwrapped."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        field_name: Optional[str] = None,
    ):
        self.kind = kind
        self.field_name = field_name
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "QueryBuildError",
            "kind": self.kind.value,
            "field_name": self.field_name,
            "message": str(self),
        }


class InvalidContainmentValueError(ValueError):
    """Raised when an explicit containment list receives an item of the wrong kind."""

    def __init__(self, kind: str, item: Any, reason: str):
        self.kind = kind
        self.item = item
        self.reason = reason
        super().__init__(f"Invalid {kind} item {item!r}: {reason}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "InvalidContainmentValueError",
            "kind": self.kind,
            "item": repr(self.item),
            "reason": self.reason,
        }
