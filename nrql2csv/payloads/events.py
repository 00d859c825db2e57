"""Payload for plain event selections (no aggregates, no facets)."""

import threading
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .base import Payload, PayloadShapeError
from .schema import EventsDocument, describe_validation_error


class EventsPayload(Payload):
    """
    Rows of raw events.

    The API lists the selected columns in ``metadata.contents[0].columns``.
    For ``SELECT *`` queries that list is missing and the columns come from
    the keys of the first event instead. That order is whatever the decoded
    mapping yields; it is computed once and reused for the lifetime of the
    payload, but callers must not rely on it being the same across runs.
    """

    def __init__(
        self,
        events: List[Dict[str, Any]],
        columns: Optional[List[str]] = None
    ):
        self.events = events
        self._columns = list(columns) if columns is not None else None
        self._lock = threading.Lock()

    @classmethod
    def parse(cls, document: Any) -> "EventsPayload":
        try:
            parsed = EventsDocument.model_validate(document)
        except ValidationError as e:
            raise PayloadShapeError(describe_validation_error(e)) from e

        if not parsed.results or parsed.results[0].events is None:
            raise PayloadShapeError("missing 'results[0].events' field")

        columns = None
        if parsed.metadata.contents:
            columns = parsed.metadata.contents[0].columns

        return cls(parsed.results[0].events, columns)

    def columns(self) -> List[str]:
        with self._lock:
            if self._columns is None:
                self._columns = list(self.events[0]) if self.events else []
            return list(self._columns)

    def rows(self) -> List[List[Any]]:
        columns = self.columns()
        return [[event.get(column) for column in columns] for event in self.events]
