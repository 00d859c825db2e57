"""
Payload abstraction shared by every response variant.

A payload is anything with ``columns()`` and ``rows()``; each row is aligned
positionally with the columns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Sequence


class Payload(ABC):
    """Tabular view over one Insights query response."""

    @abstractmethod
    def columns(self) -> List[str]:
        ...

    @abstractmethod
    def rows(self) -> List[List[Any]]:
        ...


@dataclass(frozen=True)
class StaticColumn:
    """A column holding the same value on every row."""
    name: str
    value: Any


class StaticColumnsPayload(Payload):
    """
    Wraps an existing payload and suffixes it with fixed data from static
    columns.

    Given a table with columns {a, b, c} and static columns {d, e} with values
    {4, 5}, the resulting columns are {a, b, c, d, e} and the last two columns
    are entirely 4s and 5s respectively. The wrapped payload is never mutated.
    """

    def __init__(self, payload: Payload, static_columns: Sequence[StaticColumn] = ()):
        self.payload = payload
        self.static_columns = tuple(static_columns)

    def columns(self) -> List[str]:
        return list(self.payload.columns()) + [column.name for column in self.static_columns]

    def rows(self) -> List[List[Any]]:
        values = [column.value for column in self.static_columns]
        return [list(row) + values for row in self.payload.rows()]


class PayloadShapeError(ValueError):
    """A document does not have the shape a payload variant expects."""
