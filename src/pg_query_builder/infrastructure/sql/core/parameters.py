"""
Positional parameter numbering and group-depth tracking.

Postgres drivers bind values to ``$1, $2, ...`` placeholders. A single
ParameterSequence is threaded through a build so every bound value receives
the next number, optionally starting past placeholders already used by an
enclosing statement. The placeholder text itself comes from the dialect.
"""

from typing import Callable, List


def positional_placeholder(index: int) -> str:
    """
    Render a Postgres positional placeholder.

    Examples:
        >>> positional_placeholder(3)
        '$3'
    """
    return f"${index}"


class ParameterSequence:
    """
    Monotonic placeholder counter shared across one build.

    Example:
        >>> sequence = ParameterSequence(2)
        >>> sequence.take(2)
        ['$2', '$3']
    """

    def __init__(
        self, start: int = 1, render: Callable[[int], str] = positional_placeholder
    ):
        if start < 1:
            raise ValueError(f"Parameter sequence must start at 1 or later, got {start}")
        self._next = start
        self._render = render

    @property
    def next_index(self) -> int:
        """Number the next placeholder will receive."""
        return self._next

    def take(self, count: int = 1) -> List[str]:
        """Reserve ``count`` consecutive placeholders and return them."""
        placeholders = [self._render(self._next + offset) for offset in range(count)]
        self._next += count
        return placeholders


class GroupTracker:
    """
    Depth counter for flat group open/close markers.

    Closing with nothing open returns an empty string, and ``close_all``
    returns the parentheses needed to balance whatever is still open.
    """

    def __init__(self) -> None:
        self.depth = 0

    def open(self) -> str:
        self.depth += 1
        return "("

    def close(self) -> str:
        if self.depth == 0:
            return ""
        self.depth -= 1
        return ")"

    def discard(self, count: int) -> None:
        """Forget ``count`` open groups whose ``(`` was never emitted."""
        self.depth = max(self.depth - count, 0)

    def close_all(self) -> str:
        closing = ")" * self.depth
        self.depth = 0
        return closing
