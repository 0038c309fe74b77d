"""Rescale each aligned series to 0-100 for side-by-side plotting.

Each series uses its own min and max. A constant series has its range
replaced by 1, so every observed value maps to 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coffee_commits.analysis.alignment import AlignedSeries

if TYPE_CHECKING:
    from collections.abc import Sequence

NORMALIZED_MAX = 100.0


def normalize_values(values: Sequence[float | None]) -> tuple[float | None, ...]:
    """Map non-null values to ``(v - min) / range * 100``; None stays None.

    Returns the values unchanged if none are observed.
    """
    observed = [v for v in values if v is not None]
    if not observed:
        return tuple(values)

    low = min(observed)
    value_range = max(observed) - low
    if value_range == 0:
        value_range = 1

    return tuple(
        None if v is None else (v - low) / value_range * NORMALIZED_MAX for v in values
    )


def normalize(aligned: AlignedSeries) -> AlignedSeries:
    """Normalize both series independently; dates pass through."""
    return AlignedSeries(
        dates=aligned.dates,
        series_a=normalize_values(aligned.series_a),
        series_b=normalize_values(aligned.series_b),
    )


# Name used by the dashboard pipeline
normalize_data = normalize
