"""Coffee commodity price data source (API Ninjas).

Public API:
  - prices: fetch_coffee_prices, parse_coffee_prices, generate_mock_coffee_prices
  - client: API URL and header constants
"""

from coffee_commits.datasources.coffee.client import COFFEE_API_URL
from coffee_commits.datasources.coffee.prices import (
    fetch_coffee_prices,
    generate_mock_coffee_prices,
    parse_coffee_prices,
)

__all__ = [
    "COFFEE_API_URL",
    "fetch_coffee_prices",
    "generate_mock_coffee_prices",
    "parse_coffee_prices",
]
