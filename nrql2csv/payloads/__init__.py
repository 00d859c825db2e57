"""Normalization of Insights query responses into columns and rows."""

from .base import Payload, PayloadShapeError, StaticColumn, StaticColumnsPayload
from .events import EventsPayload
from .aggregation import AggregationPayload
from .facet import FacetPayload
from .cells import unwrap_cell
from .normalizer import unmarshal_payload

__all__ = [
    "Payload",
    "PayloadShapeError",
    "StaticColumn",
    "StaticColumnsPayload",
    "EventsPayload",
    "AggregationPayload",
    "FacetPayload",
    "unwrap_cell",
    "unmarshal_payload",
]
