"""Estimate when the still-open final consumption period will finish."""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import Sequence

from config.settings import DEFAULT_LOOKBACK_DAYS
from core.models import ConsumptionPeriod, PurchaseRecord

__all__ = ["trailing_average_rate", "project_final_period"]

logger = logging.getLogger(__name__)


def trailing_average_rate(
    closed_periods: Sequence[ConsumptionPeriod],
    window_end: date,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> float | None:
    """Return the day-weighted consumption rate over ``[window_end - lookback_days, window_end)``.

    Each closed period contributes its own ``quantity_per_day`` for the days
    it overlaps the window. ``None`` means no closed period overlaps.
    """

    window_start = window_end - timedelta(days=lookback_days)
    trailing_quantity = 0.0
    trailing_days = 0

    for period in closed_periods:
        overlap_start = max(period.start, window_start)
        overlap_end = min(period.end, window_end)
        overlap_days = (overlap_end - overlap_start).days
        if overlap_days <= 0:
            continue
        trailing_quantity += overlap_days * period.quantity_per_day
        trailing_days += overlap_days

    if trailing_days <= 0:
        return None
    return trailing_quantity / trailing_days


def project_final_period(
    closed_periods: Sequence[ConsumptionPeriod],
    open_members: Sequence[PurchaseRecord],
    today: date,
    lookback_days: int = DEFAULT_LOOKBACK_DAYS,
) -> ConsumptionPeriod:
    """Build the final period from ``open_members``.

    When recent closed periods give a positive trailing rate, the end date is
    projected as ``start + ceil(total_quantity / rate)`` days. Otherwise the
    period ends on ``today`` and is not marked as projected.
    """

    if not open_members:
        raise ValueError("open_members must contain at least one purchase")

    members = tuple(open_members)
    unprojected = ConsumptionPeriod(members=members, end=today)
    if not closed_periods:
        return unprojected

    rate = trailing_average_rate(closed_periods, unprojected.start, lookback_days)
    if rate is None or rate <= 0:
        logger.debug("No usable trailing rate before %s; final period ends today", unprojected.start)
        return unprojected

    projected_days = math.ceil(unprojected.total_quantity / rate)
    end = unprojected.start + timedelta(days=projected_days)
    logger.debug(
        "Projected final period %s -> %s at %.3f units/day",
        unprojected.start,
        end,
        rate,
    )
    return ConsumptionPeriod(members=members, end=end, is_projected=True)
