"""Error types raised while querying and normalizing Insights payloads."""

from typing import Optional


class NRQLError(Exception):
    """Base class for recoverable query errors."""


class TransportError(NRQLError):
    """The Insights API could not be reached or did not answer with HTTP 200."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class FormatError(NRQLError):
    """
    None of the known payload shapes matched the response.

    Carries the failure reason of every shape that was tried together with a
    pretty-printed copy of the payload.
    """

    def __init__(
        self,
        basic_cause: str,
        aggregation_cause: str,
        facet_cause: str,
        raw_payload: str
    ):
        self.basic_cause = basic_cause
        self.aggregation_cause = aggregation_cause
        self.facet_cause = facet_cause
        self.raw_payload = raw_payload
        super().__init__(self._format_message())

    @property
    def causes(self):
        return {
            "basic": self.basic_cause,
            "aggregation": self.aggregation_cause,
            "facet": self.facet_cause,
        }

    def _format_message(self) -> str:
        errors = "\n".join(f"    {name}: {cause}" for name, cause in self.causes.items())
        return (
            "Couldn't find a match for payload.\n"
            f"Errors:\n{errors}\n"
            f"Data: {self.raw_payload}"
        )


class PayloadInvariantError(Exception):
    """
    The payload broke an assumption about the upstream data contract.

    Deliberately not an NRQLError: there is no sane way to continue, so
    callers are expected to let it terminate the program.
    """
