"""Output writers for normalized payloads."""

from .csv_writer import format_csv, stringify
from .json_writer import format_json

FORMATTERS = {
    "csv": format_csv,
    "json": format_json,
}

MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}

__all__ = [
    "format_csv",
    "format_json",
    "stringify",
    "FORMATTERS",
    "MEDIA_TYPES",
]
