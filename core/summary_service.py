"""Core logic for assembling BeanLedger dashboard summaries."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

import pandas as pd

from analytics.aggregation import build_consumption_report
from config.settings import Settings, get_settings
from core.data_loader import load_purchase_frame, purchases_from_frame
from core.formatting import build_insights, format_bag_names, format_period_end
from core.models import (
    CalendarBucket,
    ConsumptionReport,
    DashboardData,
    OverviewSummary,
    PeriodRow,
)

__all__ = [
    "BUCKET_COLUMNS",
    "build_bucket_frame",
    "build_overview_summary",
    "build_period_rows",
    "prepare_dashboard_data",
]

logger = logging.getLogger(__name__)

BUCKET_COLUMNS = [
    "Key",
    "Quantity",
    "Grams",
    "Cost",
    "Days",
    "QuantityPerDay",
    "GramsPerDay",
    "CostPerDay",
]


def build_period_rows(report: ConsumptionReport, grams_per_unit: float) -> list[PeriodRow]:
    rows: list[PeriodRow] = []
    for period in report.periods:
        rows.append(
            {
                "start": period.start,
                "end": period.end,
                "end_label": format_period_end(period),
                "is_projected": period.is_projected,
                "is_simultaneous": period.is_simultaneous,
                "members": len(period.members),
                "bag_names": format_bag_names(period.members),
                "days": period.days,
                "total_quantity": period.total_quantity,
                "total_grams": period.total_quantity * grams_per_unit,
                "total_cost": period.total_cost,
                "quantity_per_day": period.quantity_per_day,
                "grams_per_day": period.quantity_per_day * grams_per_unit,
                "cost_per_day": period.cost_per_day,
            }
        )
    return rows


def build_bucket_frame(
    buckets: Mapping[str | int, CalendarBucket],
    grams_per_unit: float,
) -> pd.DataFrame:
    """Tabulate calendar buckets, one row per key in ascending order."""

    if not buckets:
        return pd.DataFrame(columns=BUCKET_COLUMNS)

    records = []
    for key, bucket in buckets.items():
        records.append(
            {
                "Key": str(key),
                "Quantity": bucket.quantity,
                "Grams": bucket.quantity * grams_per_unit,
                "Cost": bucket.cost,
                "Days": bucket.days_covered,
                "QuantityPerDay": bucket.quantity_per_day,
                "GramsPerDay": bucket.quantity_per_day * grams_per_unit,
                "CostPerDay": bucket.cost_per_day,
            }
        )
    return pd.DataFrame.from_records(records, columns=BUCKET_COLUMNS)


def build_overview_summary(report: ConsumptionReport, grams_per_unit: float) -> OverviewSummary:
    summary = report.summary
    return {
        "total_purchases": summary.total_purchases,
        "total_cost": summary.total_cost,
        "total_quantity": summary.total_quantity,
        "total_grams": summary.total_quantity * grams_per_unit,
        "quantity_per_day": summary.quantity_per_day,
        "grams_per_day": summary.quantity_per_day * grams_per_unit,
        "cost_per_day": summary.cost_per_day,
        "days_tracked": summary.days_tracked,
        "first_purchase": summary.first_purchase,
        "today": report.today,
    }


def prepare_dashboard_data(
    csv_path: str | Path | None = None,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> DashboardData:
    settings = settings or get_settings()
    csv_path = Path(csv_path) if csv_path is not None else settings.data_path
    today = today or date.today()

    purchase_df = load_purchase_frame(csv_path)
    purchases = purchases_from_frame(purchase_df)
    report = build_consumption_report(
        purchases,
        today,
        threshold=settings.simultaneous_threshold,
        lookback_days=settings.lookback_days,
    )
    logger.info(
        "Aggregated %d purchases into %d periods for %s",
        len(purchases),
        len(report.periods),
        today,
    )

    grams_per_unit = settings.grams_per_unit
    monthly_df = build_bucket_frame(report.months, grams_per_unit)
    yearly_df = build_bucket_frame(report.years, grams_per_unit)
    summary = build_overview_summary(report, grams_per_unit)
    insights = build_insights(
        summary=summary,
        latest_period=report.periods[-1] if report.periods else None,
        monthly_df=monthly_df,
        grams_per_unit=grams_per_unit,
        currency_symbol=settings.currency_symbol,
    )

    purchases_df = purchase_df.iloc[::-1].reset_index(drop=True)
    purchases_df["grams"] = purchases_df["size"] * grams_per_unit

    return {
        "period_rows": build_period_rows(report, grams_per_unit),
        "monthly_df": monthly_df,
        "yearly_df": yearly_df,
        "purchases_df": purchases_df,
        "summary": summary,
        "insights": insights,
    }
