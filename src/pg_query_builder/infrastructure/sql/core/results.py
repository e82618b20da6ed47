"""
Discriminated build results.

Predicate and composed-query builders return either a BuildSuccess carrying
the SQL text and its positional arguments, or a BuildFailure describing why
no SQL could be produced. Callers branch on ``result.ok`` or call
``result.unwrap()`` to get ``(text, args)`` and let a QueryBuildError
propagate.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from .errors import FailureKind, QueryBuildError


@dataclass(frozen=True)
class BuildSuccess:
    """SQL text and the ordered arguments bound to its placeholders."""

    text: str
    args: List[Any] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Tuple[str, List[Any]]:
        return self.text, list(self.args)


@dataclass(frozen=True)
class BuildFailure:
    """
    A build that could not produce SQL.

    Attributes:
        kind: Failure category
        message: Human-readable description
        field_name: Column of the filter that caused the failure, if any
    """

    kind: FailureKind
    message: str
    field_name: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Tuple[str, List[Any]]:
        raise QueryBuildError(self.kind, self.message, self.field_name)


BuildResult = Union[BuildSuccess, BuildFailure]
