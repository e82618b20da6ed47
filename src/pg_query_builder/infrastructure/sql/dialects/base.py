"""Protocol implemented by SQL dialects."""

from typing import List, Protocol


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str

    def placeholder(self, index: int) -> str: ...
    def quote_literal(self, text: str) -> str: ...
    def build_insert(
        self, table: str, columns: List[str], placeholders: List[str], returning: List[str]
    ) -> str: ...
    def build_insert_default_values(self, table: str, returning: List[str]) -> str: ...
    def build_update(self, table: str, assignments: List[str], condition: str) -> str: ...
    def build_select(self, table: str, columns: List[str]) -> str: ...
