"""Tests for aligning two monthly series onto one date axis."""

from __future__ import annotations

import random

import pytest

from coffee_commits.analysis.alignment import (
    AlignedSeries,
    DateKey,
    TimeSeriesPoint,
    align,
    merge_datasets,
)


def _points(*pairs: tuple[str, float]) -> list[TimeSeriesPoint]:
    return [TimeSeriesPoint(date=d, value=v) for d, v in pairs]


def _random_series(rng: random.Random, max_len: int = 50) -> list[TimeSeriesPoint]:
    """Random series with dates in 2020-01..2025-12 (duplicates likely)."""
    return [
        TimeSeriesPoint(
            date=f"{rng.randint(2020, 2025)}-{rng.randint(1, 12):02d}",
            value=round(rng.uniform(0, 100), 2),
        )
        for _ in range(rng.randint(1, max_len))
    ]


SEEDS = list(range(25))


class TestAlign:
    """Test align on hand-written inputs."""

    def test_overlapping_dates(self) -> None:
        merged = align(
            _points(("2023-01", 3.45), ("2023-02", 3.52)),
            _points(("2023-01", 1250), ("2023-02", 1380)),
        )

        assert merged.dates == ("2023-01", "2023-02")
        assert merged.series_a == (3.45, 3.52)
        assert merged.series_b == (1250, 1380)

    def test_non_overlapping_dates(self) -> None:
        merged = align(
            _points(("2023-01", 3.45), ("2023-03", 3.60)),
            _points(("2023-02", 1250), ("2023-04", 1380)),
        )

        assert merged.dates == ("2023-01", "2023-02", "2023-03", "2023-04")
        assert merged.series_a == (3.45, None, 3.60, None)
        assert merged.series_b == (None, 1250, None, 1380)

    def test_empty_inputs(self) -> None:
        merged = align([], [])
        assert merged.dates == ()
        assert merged.series_a == ()
        assert merged.series_b == ()
        assert len(merged) == 0

    def test_single_dataset(self) -> None:
        merged = align(_points(("2023-01", 3.45)), [])
        assert merged.dates == ("2023-01",)
        assert merged.series_a == (3.45,)
        assert merged.series_b == (None,)

    def test_sorts_unsorted_input(self) -> None:
        merged = align(
            _points(("2023-03", 3.60), ("2023-01", 3.45)),
            _points(("2023-02", 1250)),
        )
        assert merged.dates == ("2023-01", "2023-02", "2023-03")
        assert merged.series_a == (3.45, None, 3.60)

    def test_sorts_across_year_boundary(self) -> None:
        merged = align(_points(("2024-01", 1.0), ("2023-12", 2.0)), [])
        assert merged.dates == ("2023-12", "2024-01")

    def test_duplicate_date_last_value_wins(self) -> None:
        merged = align(
            _points(("2023-01", 3.0), ("2023-02", 4.0), ("2023-01", 5.0)),
            _points(("2023-01", 10), ("2023-01", 20)),
        )
        assert merged.dates == ("2023-01", "2023-02")
        assert merged.series_a == (5.0, 4.0)
        assert merged.series_b == (20, None)

    def test_zero_is_kept_not_treated_as_missing(self) -> None:
        merged = align(_points(("2023-01", 0.0)), _points(("2023-01", 0)))
        assert merged.series_a == (0.0,)
        assert merged.series_b == (0,)

    def test_malformed_dates_sort_lexically(self) -> None:
        merged = align(_points(("2023-1", 1.0), ("2023-02", 2.0), ("2023-10", 3.0)), [])
        # "2023-02" < "2023-1" < "2023-10" as strings
        assert merged.dates == ("2023-02", "2023-1", "2023-10")

    def test_does_not_mutate_inputs(self) -> None:
        a = _points(("2023-02", 1.0), ("2023-01", 2.0))
        snapshot = list(a)
        align(a, [])
        assert a == snapshot

    def test_merge_datasets_alias(self) -> None:
        assert merge_datasets is align


class TestAlignProperties:
    """Union, ordering, length, and value-preservation over random inputs."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_dates_are_union_of_inputs(self, seed: int) -> None:
        rng = random.Random(seed)
        a, b = _random_series(rng), _random_series(rng)
        merged = align(a, b)
        assert set(merged.dates) == {p.date for p in a} | {p.date for p in b}

    @pytest.mark.parametrize("seed", SEEDS)
    def test_dates_sorted_and_unique(self, seed: int) -> None:
        rng = random.Random(seed)
        merged = align(_random_series(rng), _random_series(rng))
        assert list(merged.dates) == sorted(merged.dates)
        assert len(set(merged.dates)) == len(merged.dates)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_lengths_match(self, seed: int) -> None:
        rng = random.Random(seed)
        merged = align(_random_series(rng), _random_series(rng))
        assert len(merged.series_a) == len(merged.dates)
        assert len(merged.series_b) == len(merged.dates)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_values_preserved_for_unique_dates(self, seed: int) -> None:
        rng = random.Random(seed)
        unique: dict[str, TimeSeriesPoint] = {}
        for p in _random_series(rng):
            unique.setdefault(p.date, p)
        a = list(unique.values())

        merged = align(a, [])

        for p in a:
            i = merged.dates.index(p.date)
            assert merged.series_a[i] == p.value
            assert merged.series_b[i] is None

    @pytest.mark.parametrize("seed", SEEDS)
    def test_last_write_wins_matches_dict_semantics(self, seed: int) -> None:
        rng = random.Random(seed)
        b = _random_series(rng)
        expected = {p.date: p.value for p in b}

        merged = align([], b)

        assert dict(zip(merged.dates, merged.series_b, strict=True)) == expected


class TestAlignedSeries:
    """Test the AlignedSeries value type."""

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="lengths differ"):
            AlignedSeries(dates=("2023-01",), series_a=(1.0,), series_b=())

    def test_is_immutable(self) -> None:
        merged = align(_points(("2023-01", 1.0)), [])
        with pytest.raises(AttributeError):
            merged.dates = ("2024-01",)  # type: ignore[misc]

    def test_to_dict_uses_labels(self) -> None:
        merged = align(_points(("2023-01", 3.45)), _points(("2023-02", 1250)))
        assert merged.to_dict("coffee", "productivity") == {
            "dates": ["2023-01", "2023-02"],
            "coffee": [3.45, None],
            "productivity": [None, 1250],
        }


class TestDateKey:
    """Test DateKey ordering and format check."""

    def test_orders_by_string(self) -> None:
        keys = [DateKey("2024-01"), DateKey("2023-12"), DateKey("2023-02")]
        assert [str(k) for k in sorted(keys)] == ["2023-02", "2023-12", "2024-01"]

    def test_equality_and_hash(self) -> None:
        assert DateKey("2023-01") == DateKey("2023-01")
        assert len({DateKey("2023-01"), DateKey("2023-01")}) == 1

    def test_total_ordering(self) -> None:
        assert DateKey("2023-01") <= DateKey("2023-01")
        assert DateKey("2023-02") > DateKey("2023-01")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("2023-01", True), ("1999-12", True), ("2023-1", False), ("01-2023", False), ("", False)],
    )
    def test_is_well_formed(self, value: str, expected: bool) -> None:
        assert DateKey(value).is_well_formed is expected
