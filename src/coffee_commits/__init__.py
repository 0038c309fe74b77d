"""Coffee Commits - coffee prices vs. developer activity, month by month.

Architecture::

    datasources/   External APIs (API Ninjas coffee prices, GitHub commits)
    store.py       JSON cache with TTL (live → derived)
    analysis/      Pure core: align series, statistics, correlation, normalize
    renderers/     Pure data → HTML (Chart.js configs, insight cards)
    flows/         Prefect orchestration (fetch runs both sources concurrently,
                   build renders the site)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources → store (cache) → analysis → renderers → derived/site/
"""

__version__ = "0.1.0"

from coffee_commits.config import Settings
from coffee_commits.schemas import CoffeePrice, DeveloperActivity

__all__ = ["CoffeePrice", "DeveloperActivity", "Settings", "__version__"]
