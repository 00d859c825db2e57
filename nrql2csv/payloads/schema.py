"""
Wire models for the Insights query API responses.

The API sends one of three undocumented shapes depending on whether the
query selects events, aggregates them, or aggregates them per facet. These
models only describe the parts the payload classes read; everything else is
ignored.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

# Marker used in metadata when an aggregate was renamed with AS
ALIAS_FUNCTION = "alias"


class WireModel(BaseModel):
    """
    Base for the wire models.

    An explicit JSON null reads the same as a missing field, so optional
    parts of a document fall back to their defaults while required ones
    are still reported as missing.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Aggregate(WireModel):
    """One aggregate function described in the metadata."""
    function: str = ""

    # Only populated if function == "alias"
    alias: str = ""


# -----------------------------------------------------------------------------
# Event payloads (SELECT a, b FROM ...)
# -----------------------------------------------------------------------------

class EventResult(WireModel):
    events: Optional[List[Dict[str, Any]]] = None


class EventContents(WireModel):
    columns: Optional[List[str]] = None


class EventMetadata(WireModel):
    contents: List[EventContents] = Field(default_factory=list)


class EventsDocument(WireModel):
    results: List[EventResult]
    metadata: EventMetadata = Field(default_factory=EventMetadata)


# -----------------------------------------------------------------------------
# Aggregation payloads (SELECT count(*) FROM ...)
# -----------------------------------------------------------------------------

class AggregationMetadata(WireModel):
    contents: List[Aggregate] = Field(default_factory=list)


class AggregationDocument(WireModel):
    results: List[Dict[str, Any]]
    metadata: AggregationMetadata = Field(default_factory=AggregationMetadata)


# -----------------------------------------------------------------------------
# Facet payloads (SELECT count(*) FROM ... FACET name)
# -----------------------------------------------------------------------------

class FacetGroup(WireModel):
    name: Any = None
    results: List[Dict[str, Any]] = Field(default_factory=list)


class FacetContents(WireModel):
    contents: List[Aggregate] = Field(default_factory=list)


class FacetMetadata(WireModel):
    # A list when faceting on several attributes
    facet: Union[str, List[str]] = ""
    contents: FacetContents = Field(default_factory=FacetContents)


class FacetDocument(WireModel):
    facets: List[FacetGroup]
    metadata: FacetMetadata = Field(default_factory=FacetMetadata)


def describe_validation_error(error: ValidationError) -> str:
    """Collapse a pydantic error into a single line such as "results: Field required"."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "payload"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)
