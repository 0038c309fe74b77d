"""GitHub commit activity data source.

Commit counts per month for one public repository (``github/gitignore`` by
default) stand in for "developer activity". Only the most recent page of
commits is sampled.

Public API:
  - activity: fetch_developer_activity, bucket_commits_by_month,
              generate_mock_developer_activity
  - client: API URL helpers
"""

from coffee_commits.datasources.github.activity import (
    bucket_commits_by_month,
    fetch_developer_activity,
    generate_mock_developer_activity,
)
from coffee_commits.datasources.github.client import DEFAULT_REPO, commits_url

__all__ = [
    "DEFAULT_REPO",
    "bucket_commits_by_month",
    "commits_url",
    "fetch_developer_activity",
    "generate_mock_developer_activity",
]
