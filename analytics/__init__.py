"""Consumption analytics shared across BeanLedger services."""

from analytics.aggregation import (
    build_consumption_periods,
    build_consumption_report,
    summarise_purchases,
)
from analytics.distribution import (
    BucketTotals,
    distribute_by_month,
    month_key,
    month_slices,
    roll_up_years,
)
from analytics.projection import project_final_period, trailing_average_rate
from analytics.segmentation import exceeds_threshold, segment_purchases

__all__ = [
    "build_consumption_periods",
    "build_consumption_report",
    "summarise_purchases",
    "BucketTotals",
    "distribute_by_month",
    "month_key",
    "month_slices",
    "roll_up_years",
    "project_final_period",
    "trailing_average_rate",
    "exceeds_threshold",
    "segment_purchases",
]
