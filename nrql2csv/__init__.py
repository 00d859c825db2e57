"""Export New Relic Insights query results as CSV or JSON."""

from .errors import FormatError, NRQLError, PayloadInvariantError, TransportError
from .payloads import Payload, StaticColumn, StaticColumnsPayload, unmarshal_payload
from .query import Query

__version__ = "1.0.0"

__all__ = [
    "FormatError",
    "NRQLError",
    "PayloadInvariantError",
    "TransportError",
    "Payload",
    "StaticColumn",
    "StaticColumnsPayload",
    "unmarshal_payload",
    "Query",
]
