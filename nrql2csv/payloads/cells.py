"""Helpers shared by the aggregation and facet payloads."""

from typing import Any, Dict, List, Sequence

import structlog

from ..errors import PayloadInvariantError
from .schema import ALIAS_FUNCTION, Aggregate

logger = structlog.get_logger()


def unwrap_cell(cell: Dict[str, Any]) -> Any:
    """
    Return the only value of a single-element cell.

    New Relic wraps every aggregate value in a mapping keyed by the function
    name, e.g. ``{"count": 42}``. The key carries nothing the metadata does
    not already say, so it is dropped. Anything other than exactly one entry
    means the data contract changed underneath us.
    """
    if len(cell) != 1:
        logger.critical("Multiple key/value pairs found in cell", cell=cell)
        raise PayloadInvariantError(
            f"expected exactly one key/value pair in cell, found {len(cell)}: {cell!r}"
        )
    (value,) = cell.values()
    return value


def unwrap_row(cells: Sequence[Dict[str, Any]]) -> List[Any]:
    return [unwrap_cell(cell) for cell in cells]


def aggregate_columns(contents: Sequence[Aggregate]) -> List[str]:
    """Column headers for aggregates: the function name, or its alias."""
    columns = []
    for content in contents:
        if content.function == ALIAS_FUNCTION:
            columns.append(content.alias)
        else:
            columns.append(content.function)
    return columns
