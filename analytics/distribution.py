"""Spread consumption periods across calendar months and years."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from core.models import CalendarBucket, ConsumptionPeriod

__all__ = [
    "BucketTotals",
    "distribute_by_month",
    "month_key",
    "month_slices",
    "roll_up_years",
]


class BucketTotals:
    """Accumulate-or-insert mapping of calendar keys to running totals."""

    def __init__(self) -> None:
        self._totals: Dict[str | int, Tuple[float, float, int]] = {}

    def accumulate(self, key: str | int, quantity: float, cost: float, days: int) -> None:
        prev_quantity, prev_cost, prev_days = self._totals.get(key, (0.0, 0.0, 0))
        self._totals[key] = (prev_quantity + quantity, prev_cost + cost, prev_days + days)

    def __contains__(self, key: object) -> bool:
        return key in self._totals

    def __len__(self) -> int:
        return len(self._totals)

    def to_buckets(self) -> Dict[Any, CalendarBucket]:
        """Return frozen buckets in ascending key order."""

        return {
            key: CalendarBucket(key=key, quantity=quantity, cost=cost, days_covered=days)
            for key, (quantity, cost, days) in sorted(self._totals.items())
        }


def month_key(moment: date) -> str:
    return moment.strftime("%Y-%m")


def _next_month_start(moment: date) -> date:
    if moment.month == 12:
        return date(moment.year + 1, 1, 1)
    return date(moment.year, moment.month + 1, 1)


def month_slices(start: date, end: date) -> Iterator[Tuple[str, int]]:
    """Yield ``(month_key, days)`` for each calendar month ``[start, end)`` touches.

    Each slice ends on the first day of the following month, so Jan 20 to
    Feb 10 yields 12 January days and 9 February days. Ending slices on the
    last day of the month would drop one day at every boundary.
    """

    current = start
    while current < end:
        slice_end = min(_next_month_start(current), end)
        yield month_key(current), (slice_end - current).days
        current = slice_end


def distribute_by_month(periods: Iterable[ConsumptionPeriod]) -> Dict[str, CalendarBucket]:
    """Allocate each period's quantity and cost to months by day overlap.

    Periods are walked over ``[start, start + days)`` so the clamped day count
    of a zero-length period still lands in its start month.
    """

    totals = BucketTotals()
    for period in periods:
        quantity_rate = period.quantity_per_day
        cost_rate = period.cost_per_day
        effective_end = period.start + timedelta(days=period.days)
        for key, days in month_slices(period.start, effective_end):
            totals.accumulate(key, days * quantity_rate, days * cost_rate, days)
    return totals.to_buckets()


def roll_up_years(monthly: Mapping[str, CalendarBucket]) -> Dict[int, CalendarBucket]:
    """Sum monthly buckets sharing a year."""

    totals = BucketTotals()
    for key, bucket in monthly.items():
        year = int(str(key).split("-")[0])
        totals.accumulate(year, bucket.quantity, bucket.cost, bucket.days_covered)
    return totals.to_buckets()
