"""Pearson correlation between the two sides of an AlignedSeries.

Only months where both series have a value take part. Undefined cases
(fewer than two pairs, or a constant series) return 0.0 instead of NaN.
"""

from __future__ import annotations

import math
import statistics
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from coffee_commits.analysis.alignment import AlignedSeries

MIN_PAIRED_OBSERVATIONS = 2

# |r| thresholds for the human-readable label
STRONG_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.4
WEAK_THRESHOLD = 0.1


def paired_values(
    series_a: Sequence[float | None],
    series_b: Sequence[float | None],
) -> tuple[list[float], list[float]]:
    """Keep only positions where both series are non-null, preserving order."""
    xs: list[float] = []
    ys: list[float] = []
    for a, b in zip(series_a, series_b, strict=True):
        if a is not None and b is not None:
            xs.append(a)
            ys.append(b)
    return xs, ys


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Pearson r of two equal-length sequences, 0.0 where undefined.

    Args:
        xs: First sequence.
        ys: Second sequence, same length as ``xs``.

    Returns:
        Correlation in [-1, 1], or 0.0 if there are fewer than two points
        or either sequence has zero variance.
    """
    if len(xs) < MIN_PAIRED_OBSERVATIONS:
        return 0.0

    mean_x = statistics.fmean(xs)
    mean_y = statistics.fmean(ys)
    dx = [x - mean_x for x in xs]
    dy = [y - mean_y for y in ys]

    numerator = math.fsum(a * b for a, b in zip(dx, dy, strict=True))
    denom_x = math.fsum(a * a for a in dx)
    denom_y = math.fsum(b * b for b in dy)

    if denom_x == 0 or denom_y == 0:
        return 0.0

    # Root each sum separately; their product can underflow or overflow
    denominator = math.sqrt(denom_x) * math.sqrt(denom_y)
    if denominator == 0:
        return 0.0

    r = numerator / denominator
    if math.isnan(r):
        return 0.0
    # Rounding can push |r| a hair past 1
    return max(-1.0, min(1.0, r))


def correlate(aligned: AlignedSeries) -> float:
    """Pearson correlation over months where both series were observed."""
    xs, ys = paired_values(aligned.series_a, aligned.series_b)
    return pearson(xs, ys)


def describe_correlation(r: float) -> str:
    """Label a correlation coefficient, e.g. ``"moderate positive"``."""
    magnitude = abs(r)
    if magnitude < WEAK_THRESHOLD:
        return "no meaningful"
    if magnitude >= STRONG_THRESHOLD:
        strength = "strong"
    elif magnitude >= MODERATE_THRESHOLD:
        strength = "moderate"
    else:
        strength = "weak"
    direction = "positive" if r > 0 else "negative"
    return f"{strength} {direction}"


# Name used by the dashboard pipeline
calculate_correlation = correlate
