"""Insight cards: per-series statistics and the correlation summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from coffee_commits.analysis.correlation import describe_correlation
from coffee_commits.renderers import render_template

if TYPE_CHECKING:
    from coffee_commits.analysis.stats import SeriesSummaries, StatSummary


def format_trend(trend: float, fmt: str) -> str:
    """Signed trend with an arrow, e.g. ``▲ +0.20`` or ``▼ -130``."""
    if trend > 0:
        arrow = "▲"
    elif trend < 0:
        arrow = "▼"
    else:
        arrow = "▶"
    return f"{arrow} {trend:+{fmt}}"


def _card(title: str, summary: StatSummary | None, fmt: str, prefix: str = "") -> dict[str, Any]:
    if summary is None:
        return {"title": title, "rows": None}
    return {
        "title": title,
        "rows": [
            ("Minimum", f"{prefix}{summary.min:{fmt}}"),
            ("Maximum", f"{prefix}{summary.max:{fmt}}"),
            ("Average", f"{prefix}{summary.avg:{fmt}}"),
            ("Trend", format_trend(summary.trend, fmt)),
        ],
    }


def build_insights_html(summaries: SeriesSummaries, correlation: float) -> str:
    """Build the insights section.

    Args:
        summaries: Stats for coffee (series_a) and developer activity (series_b).
        correlation: Pearson r over months where both series were observed.

    Returns:
        Rendered HTML fragment.
    """
    cards = [
        _card("Coffee Price", summaries.series_a, ".2f", prefix="$"),
        _card("Developer Activity", summaries.series_b, ",.0f"),
    ]
    return render_template(
        "insights.html.j2",
        cards=cards,
        correlation=f"{correlation:.2f}",
        correlation_label=describe_correlation(correlation),
    )
