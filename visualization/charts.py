"""Plotly chart builders for the BeanLedger dashboard."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.models import PeriodRow

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_rate_chart",
    "build_grams_chart",
    "build_cost_chart",
    "build_period_timeline",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_rate_chart(
    bucket_df: pd.DataFrame,
    *,
    rate_column: str,
    total_column: str,
    rate_label: str,
    total_format: str,
    fill_color: str,
    line_color: str,
    x_title: str = "Month",
) -> go.Figure:
    """Bar chart of a per-day rate with the bucket total in the hover text."""

    if bucket_df.empty:
        return _empty_plotly_figure("No consumption data yet.")

    df = bucket_df.copy()
    df["Key"] = df["Key"].astype(str)
    customdata = np.stack([df[total_column].to_numpy(dtype=float), df["Days"].to_numpy(dtype=float)], axis=-1)
    hover_template = (
        f"%{{x}}<br>Avg: %{{y:,.2f}} {rate_label}"
        f"<br>Total: {total_format}<br>%{{customdata[1]:.0f}} days<extra></extra>"
    )

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["Key"],
            y=df[rate_column],
            name=rate_label,
            marker=dict(color=fill_color, line=dict(color=line_color, width=1)),
            customdata=customdata,
            hovertemplate=hover_template,
        )
    )
    fig.update_layout(
        title="",
        margin=dict(l=0, r=0, t=20, b=0),
        showlegend=False,
        xaxis=dict(title=x_title, showgrid=False, type="category"),
        yaxis=dict(
            title=rate_label,
            showgrid=True,
            gridcolor=TOKENS.neutral_background,
            zeroline=False,
            rangemode="tozero",
        ),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_grams_chart(bucket_df: pd.DataFrame, x_title: str = "Month") -> go.Figure:
    """Render grams per day for each calendar bucket."""

    return build_rate_chart(
        bucket_df,
        rate_column="GramsPerDay",
        total_column="Grams",
        rate_label="g/day",
        total_format="%{customdata[0]:,.0f} g",
        fill_color=TOKENS.coffee_brown,
        line_color=TOKENS.coffee_brown_line,
        x_title=x_title,
    )


def build_cost_chart(
    bucket_df: pd.DataFrame,
    x_title: str = "Month",
    currency_symbol: str | None = "$",
) -> go.Figure:
    """Render cost per day for each calendar bucket."""

    prefix = currency_symbol or ""
    return build_rate_chart(
        bucket_df,
        rate_column="CostPerDay",
        total_column="Cost",
        rate_label=f"{prefix}/day",
        total_format=f"{prefix}%{{customdata[0]:,.2f}}",
        fill_color=TOKENS.cost_green,
        line_color=TOKENS.cost_green_line,
        x_title=x_title,
    )


def build_period_timeline(period_rows: Sequence[PeriodRow]) -> go.Figure:
    """Gantt-style view of consumption periods; projected periods are greyed."""

    if not period_rows:
        return _empty_plotly_figure("No consumption periods yet.")

    df = pd.DataFrame(
        {
            "Start": pd.to_datetime([row["start"] for row in period_rows]),
            "End": pd.to_datetime([row["end"] for row in period_rows]),
            "Bags": [row["bag_names"] for row in period_rows],
            "GramsPerDay": [row["grams_per_day"] for row in period_rows],
            "Status": ["Projected" if row["is_projected"] else "Observed" for row in period_rows],
        }
    )
    # zero-length periods still need a visible bar
    df["End"] = df["End"].where(df["End"] > df["Start"], df["Start"] + pd.Timedelta(days=1))

    fig = px.timeline(
        df,
        x_start="Start",
        x_end="End",
        y="Status",
        color="Status",
        hover_name="Bags",
        hover_data={"GramsPerDay": ":.1f", "Status": False},
        color_discrete_map={
            "Observed": TOKENS.coffee_brown_line,
            "Projected": TOKENS.projected_grey,
        },
    )
    fig.update_layout(
        title="",
        margin=dict(l=0, r=0, t=20, b=0),
        showlegend=False,
        xaxis=dict(showgrid=False, tickformat=TOKENS.time_format),
        yaxis=dict(title=""),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
