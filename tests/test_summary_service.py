"""Tests for dashboard assembly, formatting helpers and settings."""

from __future__ import annotations

from datetime import date

import pytest
import streamlit as st
from pydantic import ValidationError

from config.settings import Settings, get_settings
from core.formatting import format_bag_names, format_period_end, format_size
from core.models import ConsumptionPeriod, PurchaseRecord
from core.summary_service import BUCKET_COLUMNS, prepare_dashboard_data


@pytest.fixture()
def dashboard_data(sample_csv):
    return prepare_dashboard_data(sample_csv, today=date(2025, 1, 15), settings=Settings())


def test_prepare_dashboard_data_periods(dashboard_data):
    rows = dashboard_data["period_rows"]

    assert len(rows) == 2
    assert rows[0]["start"] == date(2025, 1, 1)
    assert rows[0]["end"] == date(2025, 1, 9)
    assert rows[0]["grams_per_day"] == pytest.approx(28.3495)
    assert rows[1]["is_projected"]
    assert rows[1]["end"] == date(2025, 1, 21)
    assert rows[1]["end_label"] == "~2025-01-21 (est.)"
    assert rows[1]["bag_names"] == "unnamed"


def test_prepare_dashboard_data_buckets(dashboard_data):
    monthly_df = dashboard_data["monthly_df"]
    yearly_df = dashboard_data["yearly_df"]

    assert list(monthly_df.columns) == BUCKET_COLUMNS
    assert monthly_df["Key"].tolist() == ["2025-01"]
    assert monthly_df.loc[0, "Quantity"] == pytest.approx(20.0)
    assert monthly_df.loc[0, "Cost"] == pytest.approx(22.0)
    assert monthly_df.loc[0, "Days"] == 20
    assert monthly_df.loc[0, "GramsPerDay"] == pytest.approx(28.3495)
    assert yearly_df["Key"].tolist() == ["2025"]
    assert yearly_df.loc[0, "Grams"] == pytest.approx(monthly_df["Grams"].sum())


def test_prepare_dashboard_data_summary(dashboard_data):
    summary = dashboard_data["summary"]

    assert summary["total_purchases"] == 2
    assert summary["total_cost"] == pytest.approx(22.0)
    assert summary["days_tracked"] == 14
    assert summary["quantity_per_day"] == pytest.approx(20.0 / 14)
    assert summary["today"] == date(2025, 1, 15)
    assert dashboard_data["insights"]
    assert "21 Jan 2025" in dashboard_data["insights"][1]


def test_purchase_history_is_newest_first(dashboard_data):
    purchases_df = dashboard_data["purchases_df"]

    assert purchases_df["date"].dt.day.tolist() == [9, 1]
    assert purchases_df.loc[0, "grams"] == pytest.approx(12 * 28.3495)


def test_settings_drive_threshold(sample_csv):
    settings = Settings(simultaneous_threshold=0.5)

    data = prepare_dashboard_data(sample_csv, today=date(2025, 1, 15), settings=settings)

    assert len(data["period_rows"]) == 1
    assert data["period_rows"][0]["is_simultaneous"]
    assert not data["period_rows"][0]["is_projected"]


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("BEANLEDGER_LOOKBACK_DAYS", "14")
    monkeypatch.setenv("BEANLEDGER_CURRENCY_SYMBOL", "£")

    settings = Settings()

    assert settings.lookback_days == 14
    assert settings.currency_symbol == "£"
    assert settings.simultaneous_threshold == pytest.approx(3.0)


def test_settings_streamlit_secrets_override(monkeypatch):
    monkeypatch.setattr(st, "secrets", {"beanledger": {"simultaneous_threshold": 2.5}}, raising=False)
    get_settings.cache_clear()

    assert get_settings().simultaneous_threshold == pytest.approx(2.5)


def test_settings_validation():
    with pytest.raises(ValidationError):
        Settings(lookback_days=0)
    with pytest.raises(ValidationError):
        Settings(simultaneous_threshold=0)


def test_formatting_helpers():
    members = (
        PurchaseRecord(date(2025, 1, 1), 12.0, 20.0, name="Hologram"),
        PurchaseRecord(date(2025, 1, 2), 12.0, 20.0),
    )
    period = ConsumptionPeriod(members=members, end=date(2025, 1, 20), is_projected=True)

    assert format_bag_names(members) == "Hologram + unnamed"
    assert format_period_end(period) == "~2025-01-20 (est.)"
    assert format_period_end(ConsumptionPeriod(members=members, end=date(2025, 1, 20))) == "2025-01-20"
    assert format_size(12.0, 12.0 * 28.3495) == "12oz (340g)"
    assert format_size(0.5, 14.17) == "0.5oz (14g)"
