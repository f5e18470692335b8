"""End-to-end consumption aggregation for a fixed reference date."""

from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from analytics.distribution import distribute_by_month, roll_up_years
from analytics.projection import project_final_period
from analytics.segmentation import segment_purchases
from config.settings import DEFAULT_LOOKBACK_DAYS, DEFAULT_SIMULTANEOUS_THRESHOLD
from core.models import ConsumptionPeriod, ConsumptionReport, ConsumptionSummary, PurchaseRecord

__all__ = ["build_consumption_periods", "build_consumption_report", "summarise_purchases"]

logger = logging.getLogger(__name__)


def build_consumption_periods(
    purchases: Sequence[PurchaseRecord],
    today: date,
    *,
    threshold: float = DEFAULT_SIMULTANEOUS_THRESHOLD,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> list[ConsumptionPeriod]:
    """Segment ``purchases`` and close the final period against ``today``."""

    closed, open_members = segment_purchases(purchases, threshold)
    if not open_members:
        return []
    final_period = project_final_period(closed, open_members, today, lookback_days)
    return [*closed, final_period]


def summarise_purchases(purchases: Sequence[PurchaseRecord], today: date) -> ConsumptionSummary:
    """Overall averages from the first purchase through ``today``."""

    if not purchases:
        return ConsumptionSummary()

    first_purchase = min(purchase.date for purchase in purchases)
    days_tracked = max(1, (today - first_purchase).days)
    total_quantity = sum(purchase.quantity for purchase in purchases)
    total_cost = sum(purchase.cost for purchase in purchases)
    return ConsumptionSummary(
        total_purchases=len(purchases),
        total_quantity=total_quantity,
        total_cost=total_cost,
        days_tracked=days_tracked,
        quantity_per_day=total_quantity / days_tracked,
        cost_per_day=total_cost / days_tracked,
        first_purchase=first_purchase,
    )


def build_consumption_report(
    purchases: Sequence[PurchaseRecord],
    today: date,
    *,
    threshold: float = DEFAULT_SIMULTANEOUS_THRESHOLD,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> ConsumptionReport:
    """Run segmentation, projection and calendar distribution.

    ``purchases`` must already be in ascending date order. The result depends
    only on ``purchases`` and ``today``.
    """

    periods = build_consumption_periods(
        purchases,
        today,
        threshold=threshold,
        lookback_days=lookback_days,
    )
    months = distribute_by_month(periods)
    years = roll_up_years(months)
    summary = summarise_purchases(purchases, today)

    logger.debug(
        "Built report for %s: %d periods, %d months, %d years",
        today,
        len(periods),
        len(months),
        len(years),
    )
    return ConsumptionReport(
        today=today,
        periods=tuple(periods),
        months=months,
        years=years,
        summary=summary,
    )
