import importlib
from dataclasses import fields
from datetime import date

import pandas as pd
import plotly.graph_objects as go

from app.layout import NAV_LINKS
from app.pages.periods import period_table, purchase_table
from config.settings import Settings
from core.summary_service import BUCKET_COLUMNS, prepare_dashboard_data
from visualization import build_cost_chart, build_grams_chart, build_period_timeline, theme_tokens
from visualization.theme import ThemeTokens


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_charts_render_placeholders_for_empty_data():
    empty = pd.DataFrame(columns=BUCKET_COLUMNS)

    grams_chart = build_grams_chart(empty)
    timeline = build_period_timeline([])

    assert isinstance(grams_chart, go.Figure)
    assert len(grams_chart.data) == 0
    assert grams_chart.layout.annotations[0].text == "No consumption data yet."
    assert timeline.layout.annotations[0].text == "No consumption periods yet."


def test_charts_plot_each_bucket(sample_csv):
    data = prepare_dashboard_data(sample_csv, today=date(2025, 1, 15), settings=Settings())

    grams_chart = build_grams_chart(data["monthly_df"])
    cost_chart = build_cost_chart(data["yearly_df"], x_title="Year", currency_symbol="£")
    timeline = build_period_timeline(data["period_rows"])

    assert list(grams_chart.data[0].x) == ["2025-01"]
    assert grams_chart.data[0].y[0] == data["monthly_df"].loc[0, "GramsPerDay"]
    assert cost_chart.layout.xaxis.title.text == "Year"
    assert "£" in cost_chart.data[0].hovertemplate
    assert len(timeline.data) == 2


def test_tables_list_newest_first(sample_csv):
    data = prepare_dashboard_data(sample_csv, today=date(2025, 1, 15), settings=Settings())

    periods = period_table(data["period_rows"])
    purchases = purchase_table(data["purchases_df"])

    assert periods.loc[0, "Period"] == "2025-01-09 → ~2025-01-21 (est.)"
    assert periods.loc[1, "Days"] == 8
    assert purchases["Date"].tolist() == ["2025-01-09", "2025-01-01"]
    assert purchases.loc[0, "Store"] == "unknown"
    assert purchases.loc[1, "Cost"] == "$10.00"
    assert periods["Total size"].tolist() == ["12oz (340g)", "8oz (227g)"]
    assert purchases["Size"].tolist() == ["12oz (340g)", "8oz (227g)"]


def test_navigation_lists_only_reachable_pages():
    assert [link.slug for link in NAV_LINKS] == ["overview", "periods"]
    assert all(link.enabled for link in NAV_LINKS)


def test_charts_use_theme_colours(sample_csv):
    data = prepare_dashboard_data(sample_csv, today=date(2025, 1, 15), settings=Settings())
    tokens = theme_tokens()

    grams_chart = build_grams_chart(data["monthly_df"])
    cost_chart = build_cost_chart(data["monthly_df"])

    assert grams_chart.data[0].marker.color == tokens.coffee_brown
    assert grams_chart.data[0].marker.line.color == tokens.coffee_brown_line
    assert cost_chart.data[0].marker.color == tokens.cost_green
    assert {field.name for field in fields(ThemeTokens)} == {
        "time_format",
        "label_font",
        "coffee_brown",
        "coffee_brown_line",
        "cost_green",
        "cost_green_line",
        "projected_grey",
        "neutral_grey",
        "neutral_background",
    }
