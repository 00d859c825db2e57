"""
nrql2csv - export New Relic Insights query results as CSV or JSON.

Usage:
    nrql2csv --from Transaction --select name,duration --since "1 hour ago"
    nrql2csv --from Transaction --select "count(*)" --facet appName
    nrql2csv --from PageView --static env=prod,source=browser
    nrql2csv --nrql "SELECT * FROM Transaction LIMIT 10" --format json
    nrql2csv --from Transaction --dry             # print the query only
"""

import sys
from typing import List, NoReturn, Optional

import click
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .clients import InsightsClient
from .config import AVAILABLE_FORMATS, InsightsConfig, LoggingConfig
from .errors import NRQLError
from .payloads import StaticColumn, StaticColumnsPayload
from .query import Query
from .utils import get_logger, setup_logging, validate_insights_config, validate_query
from .writers import FORMATTERS

logger = get_logger(__name__)
console = Console(stderr=True)


def parse_columns(select: Optional[str]) -> Optional[List[str]]:
    """Split --select into column names; empty or "*" selects everything."""
    if not select or select.strip() == "*":
        return None
    return [column.strip() for column in select.split(",")]


def parse_static_columns(static: Optional[str]) -> List[StaticColumn]:
    """
    Parse ``col1=val1,col2=val2`` into static columns.

    An empty value is fine, an empty name is not.

    Raises:
        ValueError: naming the first malformed column.
    """
    static_columns = []
    if not static:
        return static_columns

    for column in static.split(","):
        name, sep, value = column.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Malformed static column: {column}")
        static_columns.append(StaticColumn(name=name, value=value.strip()))

    return static_columns


def abort(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]", highlight=False)
    sys.exit(1)


@click.command()
@click.option("--select", "select", default="", help="Comma-separated column names to query for (default: *)")
@click.option("--from", "table", default="", help="The table to query from (required unless --nrql is given)")
@click.option("--where", default="", help="The WHERE clause")
@click.option("--since", default="", help="The SINCE clause")
@click.option("--until", default="", help="The UNTIL clause")
@click.option("--facet", default="", help="The FACET column")
@click.option("--limit", type=int, default=-1, help="The LIMIT clause (omitted when negative)")
@click.option("--static", default="", help="Extra fixed-value columns (e.g. 'col1=val1,col2=val2')")
@click.option("--format", "output_format", type=click.Choice(AVAILABLE_FORMATS), default="csv", help="Output format")
@click.option("--nrql", default=None, help="Raw NRQL to run instead of the structured options")
@click.option("--dry", is_flag=True, help="Print the query and exit")
def main(
    select: str,
    table: str,
    where: str,
    since: str,
    until: str,
    facet: str,
    limit: int,
    static: str,
    output_format: str,
    nrql: Optional[str],
    dry: bool
):
    """Run an NRQL query against New Relic Insights and print the results."""
    load_dotenv()
    setup_logging(LoggingConfig().log_level)

    if nrql:
        query_string = nrql
    else:
        query = Query(
            table=table.strip(),
            columns=parse_columns(select),
            where=where,
            since=since,
            until=until,
            facet=facet,
            limit=limit
        )
        is_valid, errors = validate_query(query)
        if not is_valid:
            abort("\n".join(errors))
        query_string = str(query)
    logger.debug("Built query", nrql=query_string)

    try:
        static_columns = parse_static_columns(static)
    except ValueError as e:
        abort(str(e))

    if dry:
        click.echo(query_string)
        return

    # Validate environment variables
    try:
        config = InsightsConfig()
    except ValidationError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]", highlight=False)
        console.print("\nPlease set the required environment variables:")
        console.print("  NEW_RELIC_ACCOUNT_ID")
        console.print("  NEW_RELIC_QUERY_KEY")
        sys.exit(1)

    is_valid, errors = validate_insights_config(config.model_dump())
    if not is_valid:
        abort("Configuration error: " + "; ".join(errors))

    with InsightsClient.from_config(config) as client:
        try:
            payload = client.exec_raw(query_string)
        except NRQLError as e:
            abort(f"Error for query '{query_string}': {e}")

    if static_columns:
        payload = StaticColumnsPayload(payload, static_columns)

    FORMATTERS[output_format](sys.stdout, payload)


if __name__ == "__main__":
    main()
