"""Assembly of NRQL query strings from structured fields."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Query:
    """
    A SELECT statement against one event type.

    ``columns`` of ``None`` (or an empty list) selects ``*``. Every other
    clause is left out when empty; ``limit`` is left out when negative.
    """
    table: str
    columns: Optional[List[str]] = None
    where: str = ""
    since: str = ""
    until: str = ""
    facet: str = ""
    limit: int = -1

    def __str__(self) -> str:
        columns = ", ".join(self.columns or []) or "*"

        parts = [f"SELECT {columns} FROM {self.table}"]
        if self.where:
            parts.append(f"WHERE {self.where}")
        if self.since:
            parts.append(f"SINCE '{self.since}'")
        if self.until:
            parts.append(f"UNTIL '{self.until}'")
        if self.facet:
            parts.append(f"FACET {self.facet}")
        if self.limit >= 0:
            parts.append(f"LIMIT {self.limit}")

        return " ".join(parts)
