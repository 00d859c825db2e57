"""CSV rendering of payloads."""

import csv
import json
import math
from decimal import Decimal
from typing import Any, TextIO

from ..payloads import Payload


def stringify(value: Any) -> str:
    """
    Turn a cell value into CSV text.

    Floats are written in plain decimal notation; ``str()`` would switch to
    exponents for very small or very large values, which spreadsheets then
    misread.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value.is_integer():
        return str(int(value))
    # repr() is the shortest string that round-trips
    return format(Decimal(repr(value)), "f")


def format_csv(stream: TextIO, payload: Payload) -> None:
    """Write the payload's header row followed by one line per row."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(payload.columns())
    for row in payload.rows():
        writer.writerow([stringify(value) for value in row])
