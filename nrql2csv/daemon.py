"""
nrqld - serve Insights query results over HTTP.

``GET /?nrql=SELECT...`` answers with the result set as CSV (or JSON with
``&format=json``). A request without ``nrql`` sends an empty query
upstream, which New Relic rejects, so it is answered with a 500. Every request gets its own client; nothing is shared
between requests.
"""

import io
import sys
from typing import Iterator, Optional

import click
import uvicorn
from fastapi import Depends, FastAPI, Query
from fastapi.responses import PlainTextResponse, Response
from dotenv import load_dotenv
from pydantic import ValidationError

from .clients import InsightsClient
from .config import InsightsConfig, LoggingConfig, get_settings
from .errors import NRQLError, PayloadInvariantError
from .utils import get_logger, setup_logging
from .writers import FORMATTERS, MEDIA_TYPES

logger = get_logger(__name__)


def get_client() -> Iterator[InsightsClient]:
    """Request-scoped client built from the environment."""
    with InsightsClient.from_config(InsightsConfig()) as client:
        yield client


def _server_error() -> PlainTextResponse:
    return PlainTextResponse("Internal Server Error", status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="nrqld", description="New Relic Insights queries as CSV")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/")
    def run_query(
        nrql: str = Query("", description="NRQL query to execute"),
        output_format: str = Query("csv", alias="format", pattern="^(csv|json)$"),
        client: InsightsClient = Depends(get_client),
    ):
        logger.info("Executing query", nrql=nrql)
        buffer = io.StringIO()
        try:
            payload = client.exec_raw(nrql)
            FORMATTERS[output_format](buffer, payload)
        except NRQLError as e:
            logger.error("Query failed", nrql=nrql, status_code=500, error=str(e))
            return _server_error()
        except PayloadInvariantError as e:
            # Fatal for a one-shot CLI run, but a server keeps answering others
            logger.critical("Upstream payload broke an invariant", nrql=nrql, error=str(e))
            return _server_error()

        return Response(content=buffer.getvalue(), media_type=MEDIA_TYPES[output_format])

    return app


@click.command()
@click.option("--host", default=None, help="Interface to bind (default: $NRQLD_HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: $PORT or 8080)")
def main(host: Optional[str], port: Optional[int]):
    """Serve New Relic Insights queries over HTTP."""
    load_dotenv()
    setup_logging(LoggingConfig().log_level)

    # Fail at start-up rather than on the first request
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("Configuration error", error=str(e))
        sys.exit(1)

    host = host or settings.daemon.host
    port = port or settings.daemon.port

    logger.info("Listening", host=host, port=port)
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
