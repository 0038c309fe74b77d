"""
Prefect flow for building the dashboard page from fetched data.

Loads both cached series, aligns them, derives statistics, correlation and
normalized series, and renders a static HTML page.

Run locally:
    python -m coffee_commits.flows.build
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from coffee_commits.analysis import (
    AlignedSeries,
    SeriesSummaries,
    align,
    correlate,
    normalize,
    summarize,
)
from coffee_commits.config import get_settings
from coffee_commits.datasources.github import DEFAULT_REPO
from coffee_commits.renderers import build_error_html, render_template
from coffee_commits.renderers.charts import build_charts_html
from coffee_commits.renderers.insights import build_insights_html
from coffee_commits.schemas import (
    CoffeePrice,
    DeveloperActivity,
    parse_coffee_prices,
    parse_developer_activity,
    to_points,
    validate_coffee_prices,
    validate_developer_activity,
)
from coffee_commits.store import DataStore

# Store and output paths
store = DataStore(get_settings().data_dir)
SITE_DIR = store.derived / "site"

# Paths matching what fetch.py writes
COFFEE_PATH = Path("live/coffee_prices.json")
ACTIVITY_PATH = Path("live/developer_activity.json")
ANALYSIS_PATH = Path("derived/analysis.json")

COFFEE_KEY = "coffee"
ACTIVITY_KEY = "productivity"


@dataclass(frozen=True)
class Analysis:
    """Everything the page needs, derived from one aligned pair of series."""

    aligned: AlignedSeries
    normalized: AlignedSeries
    summaries: SeriesSummaries
    correlation: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "aligned": self.aligned.to_dict(COFFEE_KEY, ACTIVITY_KEY),
            "normalized": self.normalized.to_dict(COFFEE_KEY, ACTIVITY_KEY),
            "statistics": self.summaries.to_dict(COFFEE_KEY, ACTIVITY_KEY),
            "correlation": self.correlation,
        }


# =============================================================================
# Data loading tasks
# =============================================================================


@task(name="load-coffee-prices")
def load_coffee_prices() -> list[CoffeePrice] | None:
    """Load coffee prices from store. None if missing or invalid."""
    data = store.read(COFFEE_PATH)
    if data is None or not validate_coffee_prices(data):
        return None
    return parse_coffee_prices(data)


@task(name="load-developer-activity")
def load_developer_activity() -> list[DeveloperActivity] | None:
    """Load developer activity from store. None if missing or invalid."""
    data = store.read(ACTIVITY_PATH)
    if data is None or not validate_developer_activity(data):
        return None
    return parse_developer_activity(data)


# =============================================================================
# Analysis and rendering tasks
# =============================================================================


@task(name="analyze")
def analyze(
    coffee_prices: list[CoffeePrice],
    developer_activity: list[DeveloperActivity],
) -> Analysis:
    """Align both series, then derive stats, correlation, and normalized values."""
    aligned = align(to_points(coffee_prices), to_points(developer_activity))
    return Analysis(
        aligned=aligned,
        normalized=normalize(aligned),
        summaries=summarize(aligned),
        correlation=correlate(aligned),
    )


def _updated_label() -> str:
    """Latest fetch time of either series, formatted for the page header."""
    stamps = [
        store.read_meta(path).get("fetched_at", "") for path in (COFFEE_PATH, ACTIVITY_PATH)
    ]
    stamps = [s for s in stamps if s]
    if not stamps:
        return ""
    latest = max(datetime.fromisoformat(s) for s in stamps)
    return latest.strftime("%Y-%m-%d %H:%M UTC")


@task(name="build-html")
def build_html(analysis: Analysis | None) -> str:
    """Build the full page, or the error page when ``analysis`` is None."""
    repo = store.read_meta(ACTIVITY_PATH).get("repo", DEFAULT_REPO)
    if analysis is None:
        return render_template("base.html.j2", updated="", error=build_error_html(), repo=repo)

    return render_template(
        "base.html.j2",
        updated=_updated_label(),
        charts=build_charts_html(analysis.aligned, analysis.normalized),
        insights=build_insights_html(analysis.summaries, analysis.correlation),
        repo=repo,
    )


@task(name="save-analysis")
def save_analysis(analysis: Analysis) -> Path:
    """Write the derived numbers as JSON next to the site."""
    return store.write(ANALYSIS_PATH, analysis.to_dict(), source="coffee-commits")


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


# =============================================================================
# Main flow
# =============================================================================


@flow(name="build-site", log_prints=True)
def build_all() -> dict[str, Any]:
    """
    Build the dashboard page from the cached series.

    If either series is missing, the page shows the generic error state.
    """
    print("Loading coffee prices...")
    coffee_prices = load_coffee_prices()
    print("Loading developer activity...")
    developer_activity = load_developer_activity()

    if coffee_prices is None or developer_activity is None:
        print("Missing or invalid data. Run fetch flow first.")
        write_site(build_html(None))
        return {"error": "no data"}

    print("Analyzing...")
    analysis = analyze(coffee_prices, developer_activity)
    save_analysis(analysis)
    print(
        f"Aligned {len(analysis.aligned)} months, correlation r = {analysis.correlation:.3f}"
    )

    print("Building HTML...")
    html = build_html(analysis)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {
        "pages": 1,
        "output": str(output_path),
        "months": len(analysis.aligned),
        "correlation": analysis.correlation,
    }


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
