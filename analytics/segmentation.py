"""Group chronologically ordered purchases into consumption periods."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from config.settings import DEFAULT_SIMULTANEOUS_THRESHOLD
from core.models import ConsumptionPeriod, PurchaseRecord

__all__ = ["segment_purchases", "exceeds_threshold"]

logger = logging.getLogger(__name__)


def exceeds_threshold(group_quantity: float, days_to_next: int, threshold: float) -> bool:
    """Return ``True`` when the next purchase must overlap the current group.

    No elapsed time (same-day or out-of-order purchases) always counts as
    overlapping.
    """

    if days_to_next <= 0:
        return True
    return group_quantity / days_to_next > threshold


def segment_purchases(
    purchases: Sequence[PurchaseRecord],
    threshold: float = DEFAULT_SIMULTANEOUS_THRESHOLD,
) -> Tuple[list[ConsumptionPeriod], tuple[PurchaseRecord, ...]]:
    """Split ``purchases`` into closed periods plus the still-open final group.

    A purchase joins the current group when finishing the group before it
    would require consuming more than ``threshold`` units per day. Otherwise
    the group closes on the purchase date and the purchase starts a new one.
    The open group is returned as a member tuple; its end date is decided by
    :func:`analytics.projection.project_final_period`.
    """

    if not purchases:
        return [], ()

    closed: list[ConsumptionPeriod] = []
    current: list[PurchaseRecord] = [purchases[0]]

    for purchase in purchases[1:]:
        group_start = current[0].date
        days_to_next = (purchase.date - group_start).days
        group_quantity = sum(member.quantity for member in current)

        if exceeds_threshold(group_quantity, days_to_next, threshold):
            current.append(purchase)
            continue

        closed.append(ConsumptionPeriod(members=tuple(current), end=purchase.date))
        current = [purchase]

    logger.debug(
        "Segmented %d purchases into %d closed periods and an open group of %d",
        len(purchases),
        len(closed),
        len(current),
    )
    return closed, tuple(current)
