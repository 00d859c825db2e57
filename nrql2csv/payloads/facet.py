"""Payload for aggregate queries with a FACET clause."""

from typing import Any, List

from pydantic import ValidationError

from .base import Payload, PayloadShapeError
from .cells import aggregate_columns, unwrap_row
from .schema import FacetDocument, FacetGroup, FacetMetadata, describe_validation_error


class FacetPayload(Payload):
    """
    One row per facet group.

    The first column is the facet attribute and holds each group's name; the
    remaining columns are the aggregates in metadata order.
    """

    def __init__(self, facets: List[FacetGroup], metadata: FacetMetadata):
        self.facets = facets
        self.metadata = metadata

    @classmethod
    def parse(cls, document: Any) -> "FacetPayload":
        try:
            parsed = FacetDocument.model_validate(document)
        except ValidationError as e:
            raise PayloadShapeError(describe_validation_error(e)) from e
        return cls(parsed.facets, parsed.metadata)

    def columns(self) -> List[str]:
        facet = self.metadata.facet
        if isinstance(facet, list):
            facet = ", ".join(facet)
        return [facet] + aggregate_columns(self.metadata.contents.contents)

    def rows(self) -> List[List[Any]]:
        return [[facet.name] + unwrap_row(facet.results) for facet in self.facets]
