"""Descriptive statistics per aligned series.

Gaps (None) are dropped before computing anything. ``trend`` is the last
non-null value minus the first non-null value in timeline order, so leading
and trailing gaps are skipped rather than anchoring the trend to the full
date range.
"""

from __future__ import annotations

import statistics
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coffee_commits.analysis.alignment import AlignedSeries


@dataclass(frozen=True)
class StatSummary:
    """Min, max, mean and signed trend of one series' observations."""

    min: float
    max: float
    avg: float
    trend: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class SeriesSummaries:
    """Summaries for both aligned series. None means no observations."""

    series_a: StatSummary | None
    series_b: StatSummary | None

    def to_dict(self, label_a: str = "series_a", label_b: str = "series_b") -> dict[str, Any]:
        return {
            label_a: self.series_a.to_dict() if self.series_a else None,
            label_b: self.series_b.to_dict() if self.series_b else None,
        }


def summarize_values(values: Sequence[float | None]) -> StatSummary | None:
    """Summarize one series, ignoring gaps.

    Args:
        values: Series values in timeline order; None marks a missing month.

    Returns:
        StatSummary, or None if every value is missing.
    """
    observed = [v for v in values if v is not None]
    if not observed:
        return None

    return StatSummary(
        min=min(observed),
        max=max(observed),
        avg=statistics.fmean(observed),
        trend=observed[-1] - observed[0],
    )


def summarize(aligned: AlignedSeries) -> SeriesSummaries:
    """Compute a StatSummary for each side of an AlignedSeries."""
    return SeriesSummaries(
        series_a=summarize_values(aligned.series_a),
        series_b=summarize_values(aligned.series_b),
    )


# Name used by the dashboard pipeline
calculate_statistics = summarize
