"""Core domain package for the BeanLedger application."""

from .data_loader import PurchaseDataError, load_purchase_frame, load_purchases, purchases_from_frame
from .models import (
    CalendarBucket,
    ConsumptionPeriod,
    ConsumptionReport,
    ConsumptionSummary,
    DashboardData,
    OverviewSummary,
    PeriodRow,
    PurchaseRecord,
)

__all__ = [
    "CalendarBucket",
    "ConsumptionPeriod",
    "ConsumptionReport",
    "ConsumptionSummary",
    "DashboardData",
    "OverviewSummary",
    "PeriodRow",
    "PurchaseRecord",
    "PurchaseDataError",
    "load_purchase_frame",
    "load_purchases",
    "purchases_from_frame",
]
