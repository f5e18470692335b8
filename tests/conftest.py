"""Shared fixtures for the BeanLedger test suite."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.settings import get_settings  # noqa: E402
from core.models import PurchaseRecord  # noqa: E402


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def purchase(day: date, quantity: float, cost: float = 10.0, name: str = "") -> PurchaseRecord:
    return PurchaseRecord(date=day, quantity=quantity, cost=cost, name=name)


@pytest.fixture()
def make_purchase():
    return purchase


@pytest.fixture()
def sample_csv(tmp_path) -> Path:
    csv_path = tmp_path / "coffee.csv"
    csv_path.write_text(
        "Date,Cost,Store,Name,Size\n"
        "2025/01/01,$10.00,Blue Bottle,Hayes Valley,8oz\n"
        "2025/01/09,$12.00,,,12oz\n",
        encoding="utf-8",
    )
    return csv_path
