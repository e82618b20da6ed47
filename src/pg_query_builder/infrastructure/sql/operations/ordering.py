"""ORDER BY clause builder."""

from typing import Sequence

from ..core.defaults import normalize_sort
from ..core.identifier import column_reference
from ..core.models import SortSpec, is_ordered_sequence


def build_sql_order_by(sorts: Sequence[SortSpec]) -> str:
    """
    Build an ORDER BY clause keeping the given key order.

    Examples:
        >>> build_sql_order_by([SortSpec(name="name"), SortSpec(name="age", order="DESC")])
        'ORDER BY name ASC, age DESC'
        >>> build_sql_order_by([])
        ''
    """
    if not is_ordered_sequence(sorts):
        raise TypeError(
            f"sorts must be an ordered list or tuple, got {type(sorts).__name__}"
        )
    if not sorts:
        return ""

    terms = []
    for sort in sorts:
        sort = normalize_sort(sort)
        terms.append(f"{column_reference(sort.name)} {sort.order.value}")

    return f"ORDER BY {', '.join(terms)}"
