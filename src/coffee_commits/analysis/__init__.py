"""Cross-series alignment, statistics, correlation, and normalization.

Every function here is pure: no I/O, no HTTP, no Prefect decorators. The
aligner runs first; the other three only consume its AlignedSeries and can
run in any order.

Modules:
  - alignment: DateKey, TimeSeriesPoint, AlignedSeries, align (merge_datasets)
  - stats: StatSummary, SeriesSummaries, summarize (calculate_statistics)
  - correlation: correlate (calculate_correlation), describe_correlation
  - normalize: normalize (normalize_data)

Failure policy: nothing here raises on data. Empty input gives an empty
AlignedSeries, a missing series gives a None summary, undefined correlation
gives 0.0, and a series with no observations normalizes to itself.

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function taking an AlignedSeries.
2. Re-export it here and add tests in ``tests/test_{name}.py``.
3. Call it from ``flows/build.py`` and pass the result to a renderer.
"""

from coffee_commits.analysis.alignment import (
    AlignedSeries,
    DateKey,
    TimeSeriesPoint,
    align,
    merge_datasets,
)
from coffee_commits.analysis.correlation import (
    calculate_correlation,
    correlate,
    describe_correlation,
    pearson,
)
from coffee_commits.analysis.normalize import normalize, normalize_data
from coffee_commits.analysis.stats import (
    SeriesSummaries,
    StatSummary,
    calculate_statistics,
    summarize,
    summarize_values,
)

__all__ = [
    "AlignedSeries",
    "DateKey",
    "SeriesSummaries",
    "StatSummary",
    "TimeSeriesPoint",
    "align",
    "calculate_correlation",
    "calculate_statistics",
    "correlate",
    "describe_correlation",
    "merge_datasets",
    "normalize",
    "normalize_data",
    "pearson",
    "summarize",
    "summarize_values",
]
