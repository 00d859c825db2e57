"""JSON rendering of payloads."""

import json
from typing import TextIO

from ..payloads import Payload


def format_json(stream: TextIO, payload: Payload) -> None:
    """Write ``{"Columns": [...], "Rows": [[...], ...]}`` to the stream."""
    json.dump(
        {"Columns": payload.columns(), "Rows": payload.rows()},
        stream,
        separators=(",", ":")
    )
