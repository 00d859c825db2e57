"""
New Relic Insights Query API Client.

Runs NRQL through the Insights query endpoint and hands the response body to
the payload normalizer.
"""

from typing import Optional

import requests
import structlog

from ..errors import TransportError
from ..payloads import Payload, unmarshal_payload
from ..query import Query

logger = structlog.get_logger()


class InsightsClient:
    """
    Client for the Insights query API.

    The API answers ``GET /v1/accounts/{id}/query?nrql=...`` authenticated
    with a query key. Failed requests are not retried.
    """

    def __init__(
        self,
        account_id: str,
        query_key: str,
        region: str = "US",
        timeout: float = 60
    ):
        self.account_id = account_id
        self.query_key = query_key
        self.region = region.upper()
        self.timeout = timeout

        # Set endpoint based on region
        if self.region == "EU":
            base = "https://insights-api.eu.newrelic.com"
        else:
            base = "https://insights-api.newrelic.com"
        self.query_endpoint = f"{base}/v1/accounts/{self.account_id}/query"

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "X-Query-Key": self.query_key
        })

    @classmethod
    def from_config(cls, config) -> "InsightsClient":
        """Build a client from an InsightsConfig."""
        return cls(
            account_id=config.account_id,
            query_key=config.query_key,
            region=config.region,
            timeout=config.timeout
        )

    def exec(self, query: Query) -> Payload:
        """Execute a structured query."""
        return self.exec_raw(str(query))

    def exec_raw(self, nrql: str) -> Payload:
        """Execute an NRQL string and normalize the response."""
        logger.info("Executing NRQL query", nrql=nrql, account_id=self.account_id)

        try:
            response = self.session.get(
                self.query_endpoint,
                params={"nrql": nrql},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error("Insights API error", error=str(e))
            raise TransportError(f"Insights API request failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                "Insights API returned an error",
                status_code=response.status_code,
                body=response.text
            )
            raise TransportError(
                f"Wanted HTTP 200; got {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text
            )

        return unmarshal_payload(response.content)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "InsightsClient":
        return self

    def __exit__(self, *exc_info) -> Optional[bool]:
        self.close()
        return None
