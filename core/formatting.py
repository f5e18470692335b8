"""Formatting helpers for BeanLedger summaries."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd

from core.models import ConsumptionPeriod, OverviewSummary, PurchaseRecord

__all__ = [
    "build_insights",
    "format_bag_names",
    "format_money",
    "format_period_end",
    "format_size",
]


def format_money(value: float, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{value:,.2f}"


def format_size(quantity: float, grams: float) -> str:
    """Render a bag size as ``12oz (340g)``."""

    return f"{quantity:g}oz ({grams:,.0f}g)"


def format_bag_names(members: Sequence[PurchaseRecord]) -> str:
    return " + ".join(member.name or "unnamed" for member in members)


def format_period_end(period: ConsumptionPeriod) -> str:
    label = period.end.isoformat()
    if period.is_projected:
        return f"~{label} (est.)"
    return label


def build_insights(
    *,
    summary: OverviewSummary,
    latest_period: Optional[ConsumptionPeriod],
    monthly_df: pd.DataFrame,
    grams_per_unit: float,
    currency_symbol: str = "$",
) -> list[str]:
    insights: list[str] = []
    if summary["total_purchases"] == 0:
        return insights

    insights.append(
        (
            f"You've bought <strong>{summary['total_purchases']}</strong> bags for "
            f"<strong>{format_money(summary['total_cost'], currency_symbol)}</strong> since "
            f"{summary['first_purchase']:%d %b %Y}."
        )
    )

    if latest_period is not None:
        grams_per_day = latest_period.quantity_per_day * grams_per_unit
        if latest_period.is_projected:
            insights.append(
                (
                    f"Current bag(s) should last until <strong>{latest_period.end:%d %b %Y}</strong> "
                    f"at about {grams_per_day:,.1f} g/day."
                )
            )
        else:
            insights.append(
                f"Current bag(s) opened {latest_period.start:%d %b %Y}; no recent history to project from."
            )

    if not monthly_df.empty:
        busiest = monthly_df.loc[monthly_df["GramsPerDay"].idxmax()]
        insights.append(
            f"Heaviest month: <strong>{busiest['Key']}</strong> at {busiest['GramsPerDay']:,.1f} g/day."
        )

    return insights
