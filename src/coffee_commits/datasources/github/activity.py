"""Monthly commit counts from the GitHub commits API, with a synthetic fallback."""

from __future__ import annotations

import logging
import math
import random
from collections import Counter
from typing import Any

import requests

from coffee_commits.datasources.github.client import COMMITS_PER_PAGE, DEFAULT_REPO, commits_url
from coffee_commits.datasources.months import MOCK_MONTHS, MOCK_START, month_range
from coffee_commits.services.http import session

logger = logging.getLogger(__name__)

# Floor for the synthetic series
MOCK_MIN_ACTIVITY = 1000

# =============================================================================
# Parsing
# =============================================================================


def _commit_month(commit: dict[str, Any]) -> str:
    """Month key of a commit's author date (``2023-04-17T...`` -> ``2023-04``)."""
    try:
        author_date: Any = commit["commit"]["author"]["date"]
    except (KeyError, TypeError) as exc:
        msg = "Invalid developer activity data format: commit without author date"
        raise ValueError(msg) from exc
    if not isinstance(author_date, str):
        msg = f"Invalid developer activity data format: author date {author_date!r}"
        raise ValueError(msg)
    return author_date[:7]


def bucket_commits_by_month(commits: Any) -> list[dict[str, Any]]:
    """
    Count commits per author-date month.

    Args:
        commits: Commit listing as returned by ``GET /repos/{repo}/commits``.

    Returns:
        ``{"date", "activity_count"}`` rows sorted by month.

    Raises:
        ValueError: If the payload is not a list of commit objects.
    """
    if not isinstance(commits, list):
        msg = (
            "Invalid developer activity data format: "
            f"expected list, got {type(commits).__name__}"
        )
        raise ValueError(msg)

    counts = Counter(_commit_month(c) for c in commits)
    return [
        {"date": month, "activity_count": count}
        for month, count in sorted(counts.items())
    ]


# =============================================================================
# Mock data
# =============================================================================


def generate_mock_developer_activity(
    months: int = MOCK_MONTHS,
    rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    """Synthetic seasonal activity series starting 2023-01, around 1250 commits.

    Counts are truncated to whole commits and floored at ``MOCK_MIN_ACTIVITY``.
    """
    rng = rng or random.Random()
    activity = []
    for i, month in enumerate(month_range(MOCK_START, months)):
        count = 1250 + math.sin(i / 12 * math.pi * 2) * 400 + rng.randrange(100)
        activity.append({"date": month, "activity_count": max(MOCK_MIN_ACTIVITY, int(count))})
    return activity


# =============================================================================
# API Fetching
# =============================================================================


def fetch_developer_activity(repo: str = DEFAULT_REPO) -> list[dict[str, Any]]:
    """
    Fetch the latest page of commits and bucket them by month.

    Falls back to mock data on any request, HTTP, or format failure, or when
    the repository has no commits.

    Args:
        repo: ``owner/name`` of the repository to sample.

    Returns:
        Non-empty list of unvalidated activity rows sorted by month.
    """
    try:
        resp = session.get(commits_url(repo), params={"per_page": COMMITS_PER_PAGE})
        resp.raise_for_status()
        activity = bucket_commits_by_month(resp.json())
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Error fetching developer activity, using mock data: %s", exc)
        return generate_mock_developer_activity()

    if not activity:
        logger.warning("Commit listing for %s was empty, using mock data", repo)
        return generate_mock_developer_activity()
    return activity
