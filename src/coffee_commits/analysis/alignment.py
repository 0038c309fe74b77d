"""Align two monthly series onto a shared date axis.

Dates are calendar-month keys of the form ``YYYY-MM``. Ordering is plain
string comparison, which only matches chronological order because the format
is fixed-width and zero-padded. Keys in any other format are not rejected;
they sort lexically wherever they land, so validate upstream (see
``coffee_commits.schemas``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}$")


# =============================================================================
# Data Model
# =============================================================================


@total_ordering
@dataclass(frozen=True)
class DateKey:
    """A calendar-month key, ordered by raw string comparison."""

    value: str

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateKey):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.value

    @property
    def is_well_formed(self) -> bool:
        """True if the key matches ``YYYY-MM`` (ordering is only chronological then)."""
        return DATE_KEY_PATTERN.match(self.value) is not None


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One observation: a month key and its value."""

    date: str
    value: float


@dataclass(frozen=True)
class AlignedSeries:
    """Two series on a common, sorted, deduplicated date axis.

    ``series_a[i]`` and ``series_b[i]`` are the values at ``dates[i]``, or
    None where that series had no observation for the month.
    """

    dates: tuple[str, ...]
    series_a: tuple[float | None, ...]
    series_b: tuple[float | None, ...]

    def __post_init__(self) -> None:
        if not len(self.series_a) == len(self.series_b) == len(self.dates):
            msg = (
                f"Series lengths differ from dates: dates={len(self.dates)}, "
                f"series_a={len(self.series_a)}, series_b={len(self.series_b)}"
            )
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self.dates)

    def to_dict(self, label_a: str = "series_a", label_b: str = "series_b") -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with custom series labels."""
        return {
            "dates": list(self.dates),
            label_a: list(self.series_a),
            label_b: list(self.series_b),
        }


# =============================================================================
# Alignment
# =============================================================================


def _index_by_date(points: Iterable[TimeSeriesPoint]) -> dict[DateKey, float]:
    """Map each date to its value, later points overwriting earlier ones."""
    by_date: dict[DateKey, float] = {}
    for point in points:
        by_date[DateKey(point.date)] = point.value
    return by_date


def align(
    series_a: Sequence[TimeSeriesPoint],
    series_b: Sequence[TimeSeriesPoint],
) -> AlignedSeries:
    """Merge two series into one date-indexed structure with None-filled gaps.

    Args:
        series_a: Observations for the first series (e.g. coffee prices).
        series_b: Observations for the second series (e.g. commit counts).

    Returns:
        AlignedSeries whose ``dates`` is the sorted union of both inputs' dates.
        If a date appears more than once within one input, the last value wins.
    """
    a_by_date = _index_by_date(series_a)
    b_by_date = _index_by_date(series_b)

    keys = sorted(a_by_date.keys() | b_by_date.keys())

    return AlignedSeries(
        dates=tuple(str(k) for k in keys),
        series_a=tuple(a_by_date.get(k) for k in keys),
        series_b=tuple(b_by_date.get(k) for k in keys),
    )


# Name used by the dashboard pipeline
merge_datasets = align
