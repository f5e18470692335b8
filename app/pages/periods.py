"""Consumption periods and purchase history page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app.layout import card
from core.formatting import format_size
from core.models import DashboardData, PeriodRow
from visualization import build_period_timeline


def period_table(period_rows: list[PeriodRow], currency_symbol: str = "$") -> pd.DataFrame:
    """Display frame for the periods table, newest period first."""

    records = []
    for row in reversed(period_rows):
        bags = row["bag_names"] + (" (simultaneous)" if row["is_simultaneous"] else "")
        records.append(
            {
                "Period": f"{row['start']:%Y-%m-%d} → {row['end_label']}",
                "Bag(s)": bags,
                "Days": row["days"],
                "Total size": format_size(row["total_quantity"], row["total_grams"]),
                "Usage rate": f"{row['grams_per_day']:,.1f} g/day",
                "Cost rate": f"{currency_symbol}{row['cost_per_day']:,.2f}/day",
            }
        )
    return pd.DataFrame.from_records(
        records,
        columns=["Period", "Bag(s)", "Days", "Total size", "Usage rate", "Cost rate"],
    )


def purchase_table(purchases_df: pd.DataFrame, currency_symbol: str = "$") -> pd.DataFrame:
    if purchases_df.empty:
        return pd.DataFrame(columns=["Date", "Name", "Store", "Size", "Cost"])

    return pd.DataFrame(
        {
            "Date": purchases_df["date"].dt.strftime("%Y-%m-%d"),
            "Name": purchases_df["name"].replace("", "unnamed"),
            "Store": purchases_df["store"].replace("", "unknown"),
            "Size": [
                format_size(size, grams)
                for size, grams in zip(purchases_df["size"], purchases_df["grams"])
            ],
            "Cost": [f"{currency_symbol}{cost:,.2f}" for cost in purchases_df["cost"]],
        }
    )


def render_page(data: DashboardData, currency_symbol: str = "$") -> None:
    """Render the periods page."""

    st.title("Consumption periods")

    with card("Timeline", suffix="Projected periods in grey"):
        st.plotly_chart(build_period_timeline(data["period_rows"]), use_container_width=True)

    with card("Periods"):
        st.dataframe(period_table(data["period_rows"], currency_symbol), hide_index=True, use_container_width=True)

    with card("Purchase history"):
        st.dataframe(purchase_table(data["purchases_df"], currency_symbol), hide_index=True, use_container_width=True)


__all__ = ["period_table", "purchase_table", "render_page"]
