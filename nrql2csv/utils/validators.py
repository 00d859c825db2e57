"""Validation utilities for configuration and queries."""

from typing import Dict, Any, List, Tuple

from ..query import Query


def validate_insights_config(config: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Validate New Relic Insights configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    # Check account ID
    account_id = str(config.get("account_id", "") or "")
    if not account_id:
        errors.append("NEW_RELIC_ACCOUNT_ID is required")
    elif not account_id.isdigit():
        errors.append("NEW_RELIC_ACCOUNT_ID should be numeric")

    # Check query key
    if not config.get("query_key"):
        errors.append("NEW_RELIC_QUERY_KEY is required")

    # Check region
    region = (config.get("region") or "US").upper()
    if region not in ["US", "EU"]:
        errors.append("NEW_RELIC_REGION should be 'US' or 'EU'")

    return len(errors) == 0, errors


def validate_query(query: Query) -> Tuple[bool, List[str]]:
    """Validate a structured query before it is sent."""
    errors = []

    if not query.table or not query.table.strip():
        errors.append("Missing --from flag")

    if not isinstance(query.limit, int) or isinstance(query.limit, bool):
        errors.append(f"Invalid limit: {query.limit!r}")

    for column in query.columns or []:
        if not column:
            errors.append("Empty column name in --select")
            break

    return len(errors) == 0, errors
