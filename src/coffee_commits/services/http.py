"""
Shared HTTP client for the two monthly-series APIs.

Both datasources (API Ninjas commodities, GitHub commits) go through one
``requests.Session`` that retries once on rate limiting or a 502/503/504,
sends JSON accept headers, and applies a default timeout. Anything still
failing after the retry reaches the datasource, which falls back to mock data.

Usage::

    from coffee_commits.datasources.github import commits_url
    from coffee_commits.services.http import session

    resp = session.get(commits_url("github/gitignore"), params={"per_page": 100})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from coffee_commits import __version__

if TYPE_CHECKING:
    from collections.abc import Mapping

#: One retry, 0.5s backoff between attempts.
DEFAULT_RETRY = Retry(
    total=1,
    backoff_factor=0.5,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # callers use resp.raise_for_status()
)

DEFAULT_TIMEOUT = 15  # seconds

DEFAULT_HEADERS = {
    "User-Agent": f"coffee-commits/{__version__}",
    "Accept": "application/json",
}


class TimeoutSession(requests.Session):
    """Session whose requests carry ``timeout`` unless one is passed explicitly."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Mapping[str, str] | None = None,
) -> TimeoutSession:
    """
    Build a session with the retry adapter mounted for http and https.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
        headers: Extra headers merged over ``DEFAULT_HEADERS``.
    """
    s = TimeoutSession(timeout)
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update(DEFAULT_HEADERS)
    if headers:
        s.headers.update(headers)
    return s


#: Module-level session, import and use directly.
session: TimeoutSession = create_session()
