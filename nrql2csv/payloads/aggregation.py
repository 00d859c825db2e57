"""Payload for aggregate queries without a FACET clause."""

from typing import Any, Dict, List

from pydantic import ValidationError

from .base import Payload, PayloadShapeError
from .cells import aggregate_columns, unwrap_row
from .schema import Aggregate, AggregationDocument, describe_validation_error


class AggregationPayload(Payload):
    """One column per aggregate function and always exactly one row."""

    def __init__(self, results: List[Dict[str, Any]], contents: List[Aggregate]):
        self.results = results
        self.contents = contents

    @classmethod
    def parse(cls, document: Any) -> "AggregationPayload":
        try:
            parsed = AggregationDocument.model_validate(document)
        except ValidationError as e:
            raise PayloadShapeError(describe_validation_error(e)) from e
        return cls(parsed.results, parsed.metadata.contents)

    def columns(self) -> List[str]:
        return aggregate_columns(self.contents)

    def rows(self) -> List[List[Any]]:
        return [unwrap_row(self.results)]
