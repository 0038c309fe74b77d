"""
Prefect flow for fetching both monthly series.

The coffee price and commit activity requests are submitted together and
run concurrently; the flow waits for both, validates both batches, and only
then writes them to the store.

Run locally:
    python -m coffee_commits.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m coffee_commits.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from coffee_commits.config import get_settings
from coffee_commits.datasources import coffee, github
from coffee_commits.schemas import validate_coffee_prices, validate_developer_activity
from coffee_commits.store import DataStore

# Data store rooted at the configured data directory
store = DataStore(get_settings().data_dir)

# Relative paths within the store
COFFEE_PATH = Path("live/coffee_prices.json")
ACTIVITY_PATH = Path("live/developer_activity.json")

COFFEE_SOURCE = "api-ninjas.com"
ACTIVITY_SOURCE = "api.github.com"

DEFAULT_CACHE_HOURS = 6


class DataUnavailableError(RuntimeError):
    """A fetched batch failed validation; nothing was written."""


@task(name="fetch-coffee-prices", retries=1, retry_delay_seconds=1)
def fetch_coffee_prices(api_key: str | None = None) -> list[dict[str, Any]]:
    """Fetch monthly coffee price rows (mock series if the API is unavailable)."""
    return coffee.fetch_coffee_prices(api_key)


@task(name="fetch-developer-activity", retries=1, retry_delay_seconds=1)
def fetch_developer_activity(repo: str = github.DEFAULT_REPO) -> list[dict[str, Any]]:
    """Fetch monthly commit count rows (mock series if the API is unavailable)."""
    return github.fetch_developer_activity(repo)


def validate_batches(
    coffee_prices: list[dict[str, Any]],
    developer_activity: list[dict[str, Any]],
) -> None:
    """Reject the refresh if either batch fails its schema.

    Raises:
        DataUnavailableError: Naming the first invalid batch.
    """
    if not validate_coffee_prices(coffee_prices):
        msg = "Invalid coffee prices data"
        raise DataUnavailableError(msg)
    if not validate_developer_activity(developer_activity):
        msg = "Invalid developer activity data"
        raise DataUnavailableError(msg)


@task(name="save-series")
def save_series(
    coffee_prices: list[dict[str, Any]],
    developer_activity: list[dict[str, Any]],
    cache_hours: int = DEFAULT_CACHE_HOURS,
    repo: str = github.DEFAULT_REPO,
) -> tuple[Path, Path]:
    """Save both validated batches via store with the same expiry."""
    valid_until = datetime.now(UTC) + timedelta(hours=cache_hours)
    coffee_path = store.write(
        COFFEE_PATH,
        coffee_prices,
        source=COFFEE_SOURCE,
        valid_until=valid_until,
        records=len(coffee_prices),
    )
    activity_path = store.write(
        ACTIVITY_PATH,
        developer_activity,
        source=ACTIVITY_SOURCE,
        valid_until=valid_until,
        records=len(developer_activity),
        repo=repo,
    )
    return coffee_path, activity_path


@flow(name="fetch-data", log_prints=True)
def fetch_all(
    api_key: str | None = None,
    repo: str = github.DEFAULT_REPO,
    cache_hours: int = DEFAULT_CACHE_HOURS,
    force: bool = False,
) -> dict[str, Any]:
    """
    Fetch both data sources.

    Skips the network entirely while both cached batches are fresh, unless
    ``force`` is set.

    Raises:
        DataUnavailableError: If either fetched batch fails validation.
    """
    if not force and store.is_fresh(COFFEE_PATH) and store.is_fresh(ACTIVITY_PATH):
        print("Coffee prices and developer activity are fresh, skipping fetch.")
        coffee_prices = store.read(COFFEE_PATH) or []
        developer_activity = store.read(ACTIVITY_PATH) or []
        return {
            "coffee_months": len(coffee_prices),
            "activity_months": len(developer_activity),
            "fetched": False,
        }

    print(f"Fetching coffee prices and developer activity ({repo})...")
    coffee_future = fetch_coffee_prices.submit(api_key)
    activity_future = fetch_developer_activity.submit(repo)
    coffee_prices = coffee_future.result()
    developer_activity = activity_future.result()

    validate_batches(coffee_prices, developer_activity)

    coffee_path, activity_path = save_series(
        coffee_prices, developer_activity, cache_hours=cache_hours, repo=repo
    )
    print(f"Saved {len(coffee_prices)} months of coffee prices to {coffee_path}")
    print(f"Saved {len(developer_activity)} months of developer activity to {activity_path}")

    return {
        "coffee_months": len(coffee_prices),
        "activity_months": len(developer_activity),
        "fetched": True,
    }


if __name__ == "__main__":
    settings = get_settings()
    result = fetch_all(api_key=settings.api_ninjas_key, cache_hours=settings.cache_hours)
    print(f"Flow complete: {result}")
