"""Monthly coffee prices from API Ninjas, with a synthetic fallback."""

from __future__ import annotations

import logging
import math
import random
from typing import Any

import requests

from coffee_commits.datasources.coffee.client import API_KEY_HEADER, COFFEE_API_URL, COFFEE_QUERY
from coffee_commits.datasources.months import MOCK_MONTHS, MOCK_START, current_month, month_range
from coffee_commits.services.http import session

logger = logging.getLogger(__name__)

# =============================================================================
# Parsing
# =============================================================================


def _parse_price(raw: Any) -> float:
    """Coerce an API price to float; unparseable or NaN prices become 0.0."""
    try:
        price = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(price) else price


def parse_coffee_prices(payload: Any) -> list[dict[str, Any]]:
    """
    Map the commodities response to ``{"date", "price_usd"}`` rows.

    Items without a ``month`` are stamped with the current month. Rows are not
    schema-checked here; a malformed month or negative price is left for the
    fetch flow to reject.

    Raises:
        ValueError: If the payload is not a list of objects.
    """
    if not isinstance(payload, list):
        msg = f"Invalid coffee prices data format: expected list, got {type(payload).__name__}"
        raise ValueError(msg)
    if not all(isinstance(item, dict) for item in payload):
        msg = "Invalid coffee prices data format: expected a list of objects"
        raise ValueError(msg)

    return [
        {
            "date": item.get("month") or current_month(),
            "price_usd": _parse_price(item.get("price")),
        }
        for item in payload
    ]


# =============================================================================
# Mock data
# =============================================================================


def generate_mock_coffee_prices(
    months: int = MOCK_MONTHS,
    rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    """Synthetic seasonal price series starting 2023-01, around $3.45."""
    rng = rng or random.Random()
    prices = []
    for i, month in enumerate(month_range(MOCK_START, months)):
        price = 3.45 + math.sin(i / 12 * math.pi * 2) * 0.5 + rng.random() * 0.2
        prices.append({"date": month, "price_usd": round(price, 2)})
    return prices


# =============================================================================
# API Fetching
# =============================================================================


def fetch_coffee_prices(api_key: str | None = None) -> list[dict[str, Any]]:
    """
    Fetch monthly coffee prices, falling back to mock data when the request
    fails, the response is not a list of objects, or it has no rows.

    Args:
        api_key: API Ninjas key. Sent as ``X-Api-Key`` when given.

    Returns:
        Non-empty list of unvalidated price rows.
    """
    headers = {API_KEY_HEADER: api_key} if api_key else {}
    try:
        resp = session.get(COFFEE_API_URL, params=COFFEE_QUERY, headers=headers)
        resp.raise_for_status()
        prices = parse_coffee_prices(resp.json())
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Error fetching coffee prices, using mock data: %s", exc)
        return generate_mock_coffee_prices()

    if not prices:
        logger.warning("Coffee price API returned no rows, using mock data")
        return generate_mock_coffee_prices()
    return prices
