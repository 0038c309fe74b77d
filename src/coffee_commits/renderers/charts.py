"""Chart.js line-chart configs for the aligned series.

Config builders return plain dicts; ``build_charts_html`` embeds them as JSON
next to their ``<canvas>`` elements. Gaps (None) become JSON ``null``, which
Chart.js draws as breaks in the line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from coffee_commits.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coffee_commits.analysis.alignment import AlignedSeries

COFFEE_COLOR = "#8B4513"
ACTIVITY_COLOR = "#2E86AB"

COFFEE_LABEL = "Coffee Price (USD)"
ACTIVITY_LABEL = "Developer Activity"


def _fill(color: str) -> str:
    """Translucent fill: the line colour with an ``20`` alpha suffix."""
    return f"{color}20"


def get_chart_config(
    label: str,
    dates: Sequence[str],
    values: Sequence[float | None],
    color: str,
    y_axis_label: str,
) -> dict[str, Any]:
    """Single-series filled line chart."""
    return {
        "type": "line",
        "data": {
            "labels": list(dates),
            "datasets": [
                {
                    "label": label,
                    "data": list(values),
                    "borderColor": color,
                    "backgroundColor": _fill(color),
                    "borderWidth": 2,
                    "fill": True,
                    "tension": 0.4,
                    "pointRadius": 4,
                    "pointBackgroundColor": color,
                    "pointBorderColor": "#fff",
                    "pointBorderWidth": 2,
                    "pointHoverRadius": 6,
                }
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": True,
            "plugins": {
                "legend": {
                    "display": True,
                    "position": "top",
                    "labels": {"font": {"size": 12}, "padding": 15},
                }
            },
            "scales": {
                "y": {
                    "beginAtZero": False,
                    "title": {"display": True, "text": y_axis_label},
                    "ticks": {"font": {"size": 11}},
                },
                "x": {
                    "title": {"display": True, "text": "Month"},
                    "ticks": {"font": {"size": 11}},
                },
            },
        },
    }


def get_comparison_chart_config(aligned: AlignedSeries) -> dict[str, Any]:
    """Both raw series on one chart, each against its own y-axis."""
    return {
        "type": "line",
        "data": {
            "labels": list(aligned.dates),
            "datasets": [
                {
                    "label": COFFEE_LABEL,
                    "data": list(aligned.series_a),
                    "borderColor": COFFEE_COLOR,
                    "backgroundColor": _fill(COFFEE_COLOR),
                    "borderWidth": 2,
                    "fill": False,
                    "tension": 0.4,
                    "pointRadius": 3,
                    "yAxisID": "y",
                },
                {
                    "label": ACTIVITY_LABEL,
                    "data": list(aligned.series_b),
                    "borderColor": ACTIVITY_COLOR,
                    "backgroundColor": _fill(ACTIVITY_COLOR),
                    "borderWidth": 2,
                    "fill": False,
                    "tension": 0.4,
                    "pointRadius": 3,
                    "yAxisID": "y1",
                },
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": True,
            "interaction": {"mode": "index", "intersect": False},
            "plugins": {"legend": {"display": True, "position": "top"}},
            "scales": {
                "y": {
                    "type": "linear",
                    "display": True,
                    "position": "left",
                    "title": {"display": True, "text": COFFEE_LABEL},
                },
                "y1": {
                    "type": "linear",
                    "display": True,
                    "position": "right",
                    "title": {"display": True, "text": "Activity Count"},
                    "grid": {"drawOnChartArea": False},
                },
            },
        },
    }


def get_normalized_chart_config(normalized: AlignedSeries) -> dict[str, Any]:
    """Both series rescaled to 0-100 on a shared axis."""
    return {
        "type": "line",
        "data": {
            "labels": list(normalized.dates),
            "datasets": [
                {
                    "label": "Coffee Price (Normalized)",
                    "data": list(normalized.series_a),
                    "borderColor": COFFEE_COLOR,
                    "backgroundColor": _fill(COFFEE_COLOR),
                    "borderWidth": 2,
                    "fill": True,
                    "tension": 0.4,
                    "pointRadius": 3,
                },
                {
                    "label": "Developer Activity (Normalized)",
                    "data": list(normalized.series_b),
                    "borderColor": ACTIVITY_COLOR,
                    "backgroundColor": _fill(ACTIVITY_COLOR),
                    "borderWidth": 2,
                    "fill": True,
                    "tension": 0.4,
                    "pointRadius": 3,
                },
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": True,
            "plugins": {"legend": {"display": True, "position": "top"}},
            "scales": {
                "y": {
                    "beginAtZero": True,
                    "max": 100,
                    "title": {"display": True, "text": "Normalized Value (0-100)"},
                }
            },
        },
    }


def build_charts_html(aligned: AlignedSeries, normalized: AlignedSeries) -> str:
    """Build the chart grid: coffee, activity, comparison, normalized.

    Args:
        aligned: Raw aligned series (series_a = coffee, series_b = activity).
        normalized: The same series after ``analysis.normalize``.

    Returns:
        Rendered HTML fragment with one canvas and config per chart.
    """
    charts = [
        {
            "id": "coffeeChart",
            "title": "Coffee Prices",
            "config": get_chart_config(
                COFFEE_LABEL, aligned.dates, aligned.series_a, COFFEE_COLOR, "Price (USD)"
            ),
        },
        {
            "id": "productivityChart",
            "title": "Developer Activity",
            "config": get_chart_config(
                ACTIVITY_LABEL, aligned.dates, aligned.series_b, ACTIVITY_COLOR, "Activity Count"
            ),
        },
        {
            "id": "comparisonChart",
            "title": "Side by Side",
            "config": get_comparison_chart_config(aligned),
        },
        {
            "id": "normalizedChart",
            "title": "Normalized Comparison",
            "config": get_normalized_chart_config(normalized),
        },
    ]
    return render_template("charts.html.j2", charts=charts, months=len(aligned))
