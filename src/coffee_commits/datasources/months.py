"""Month-key helpers shared by the datasources."""

from __future__ import annotations

from datetime import date

# First month of the synthetic fallback series
MOCK_START = date(2023, 1, 1)
MOCK_MONTHS = 12


def month_key(d: date) -> str:
    """Format a date as its ``YYYY-MM`` month key."""
    return f"{d.year:04d}-{d.month:02d}"


def current_month() -> str:
    """Month key for today."""
    return month_key(date.today())


def month_range(start: date, count: int) -> list[str]:
    """Consecutive month keys beginning at ``start``'s month.

    >>> month_range(date(2023, 11, 1), 3)
    ['2023-11', '2023-12', '2024-01']
    """
    keys = []
    for i in range(count):
        total = start.month - 1 + i
        keys.append(f"{start.year + total // 12:04d}-{total % 12 + 1:02d}")
    return keys
