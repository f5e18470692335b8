"""Overview dashboard page layout."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app.layout import card
from core.formatting import format_money
from core.models import DashboardData, OverviewSummary
from visualization import build_cost_chart, build_grams_chart


def _render_stat_cards(summary: OverviewSummary, currency_symbol: str) -> None:
    cols = st.columns(4)
    cols[0].metric("Total bags", f"{summary['total_purchases']}")
    cols[1].metric("Total spent", format_money(summary["total_cost"], currency_symbol))
    cols[2].metric("Avg g/day", f"{summary['grams_per_day']:,.1f}")
    cols[3].metric("Avg cost/day", format_money(summary["cost_per_day"], currency_symbol))
    if summary["first_purchase"] is not None:
        st.caption(
            f"{summary['days_tracked']} days tracked since {summary['first_purchase']:%d %b %Y} "
            f"· as of {summary['today']:%d %b %Y}"
        )


def _bucket_frame(data: DashboardData, granularity: str) -> pd.DataFrame:
    if granularity == "Yearly":
        return data["yearly_df"]
    return data["monthly_df"]


def render_page(data: DashboardData, granularity: str, currency_symbol: str = "$") -> None:
    """Render the overview dashboard page."""

    st.title("Coffee consumption")
    summary = data["summary"]
    if summary["total_purchases"] == 0:
        st.info("No purchases recorded yet.")
        return

    _render_stat_cards(summary, currency_symbol)

    x_title = "Year" if granularity == "Yearly" else "Month"
    bucket_df = _bucket_frame(data, granularity)

    with card(f"Grams per day by {x_title.lower()}", suffix=granularity):
        st.plotly_chart(build_grams_chart(bucket_df, x_title=x_title), use_container_width=True)

    with card(f"Cost per day by {x_title.lower()}", suffix=granularity):
        st.plotly_chart(
            build_cost_chart(bucket_df, x_title=x_title, currency_symbol=currency_symbol),
            use_container_width=True,
        )

    with card("Highlights"):
        if data["insights"]:
            items = "".join(f"<li>{item}</li>" for item in data["insights"])
            st.markdown(f"<ul class='bl-insights'>{items}</ul>", unsafe_allow_html=True)
        else:
            st.info("Highlights will appear once purchases are recorded.")


__all__ = ["render_page"]
