"""
Detection of the payload variant behind an Insights response.

The API gives no explicit type tag, so each variant is tried in turn and the
first one whose shape matches wins. The shapes can overlap structurally, so
the order below is significant: events, then aggregation, then facet.
"""

import json
from typing import Any, Callable, List, Tuple, Union

import structlog

from ..errors import FormatError
from .aggregation import AggregationPayload
from .base import Payload, PayloadShapeError
from .events import EventsPayload
from .facet import FacetPayload

logger = structlog.get_logger()

PAYLOAD_PARSERS: List[Tuple[str, Callable[[Any], Payload]]] = [
    ("basic", EventsPayload.parse),
    ("aggregation", AggregationPayload.parse),
    ("facet", FacetPayload.parse),
]


def unmarshal_payload(data: Union[bytes, str]) -> Payload:
    """
    Decode a raw Insights response into the matching payload variant.

    Raises:
        FormatError: if no variant matches; the error lists why each one
            was rejected.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    try:
        document = json.loads(data)
    except ValueError as e:
        cause = f"invalid JSON: {e}"
        raise FormatError(cause, cause, cause, data) from e

    causes = {}
    for name, parse in PAYLOAD_PARSERS:
        try:
            payload = parse(document)
        except PayloadShapeError as e:
            causes[name] = str(e)
            continue
        logger.debug("Matched payload variant", variant=name)
        return payload

    raise FormatError(
        basic_cause=causes["basic"],
        aggregation_cause=causes["aggregation"],
        facet_cause=causes["facet"],
        raw_payload=json.dumps(document, indent=4),
    )
