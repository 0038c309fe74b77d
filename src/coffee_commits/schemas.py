"""
Domain models for coffee-commits.

Pydantic models for the two monthly series the datasources produce.
These define the canonical schema - datasources normalize API responses to
these, and the fetch flow rejects any batch that does not validate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from coffee_commits.analysis.alignment import TimeSeriesPoint

if TYPE_CHECKING:
    from collections.abc import Iterable

MONTH_PATTERN = r"^\d{4}-\d{2}$"

# =============================================================================
# Series records
# =============================================================================


class CoffeePrice(BaseModel):
    """Monthly coffee commodity price."""

    model_config = {"strict": True}

    date: str = Field(..., pattern=MONTH_PATTERN, description="Month key (YYYY-MM)")
    price_usd: float = Field(..., ge=0)

    def to_point(self) -> TimeSeriesPoint:
        return TimeSeriesPoint(date=self.date, value=self.price_usd)


class DeveloperActivity(BaseModel):
    """Monthly count of commits to the tracked repository."""

    model_config = {"strict": True}

    date: str = Field(..., pattern=MONTH_PATTERN, description="Month key (YYYY-MM)")
    activity_count: int = Field(..., ge=0)

    def to_point(self) -> TimeSeriesPoint:
        return TimeSeriesPoint(date=self.date, value=self.activity_count)


_coffee_batch = TypeAdapter(list[CoffeePrice])
_activity_batch = TypeAdapter(list[DeveloperActivity])


# =============================================================================
# Batch validation
# =============================================================================


def _validates(adapter: TypeAdapter[Any], data: Any) -> bool:
    if not isinstance(data, list):
        return False
    try:
        adapter.validate_python(data)
    except ValidationError:
        return False
    return True


def validate_coffee_prices(data: Any) -> bool:
    """True if ``data`` is a list of valid coffee price records (dicts or models)."""
    if isinstance(data, list):
        data = [d.model_dump() if isinstance(d, BaseModel) else d for d in data]
    return _validates(_coffee_batch, data)


def validate_developer_activity(data: Any) -> bool:
    """True if ``data`` is a list of valid developer activity records (dicts or models)."""
    if isinstance(data, list):
        data = [d.model_dump() if isinstance(d, BaseModel) else d for d in data]
    return _validates(_activity_batch, data)


def parse_coffee_prices(data: list[dict[str, Any]]) -> list[CoffeePrice]:
    """Validate and parse a stored batch. Raises ValidationError on bad input."""
    return _coffee_batch.validate_python(data)


def parse_developer_activity(data: list[dict[str, Any]]) -> list[DeveloperActivity]:
    """Validate and parse a stored batch. Raises ValidationError on bad input."""
    return _activity_batch.validate_python(data)


def to_points(records: Iterable[CoffeePrice | DeveloperActivity]) -> list[TimeSeriesPoint]:
    """Convert validated records to the analysis layer's TimeSeriesPoint."""
    return [r.to_point() for r in records]

