"""BeanLedger dashboard with responsive card layout."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.layout import (  # noqa: E402
    NAV_LINKS,
    determine_active_page,
    inject_css,
    render_navbar,
    render_sidebar_filters,
)
from app.pages import render_overview_page, render_periods_page  # noqa: E402
from config import configure_logging, get_settings  # noqa: E402
from core import DashboardData, PurchaseDataError  # noqa: E402
from core.summary_service import prepare_dashboard_data  # noqa: E402


@st.cache_data(show_spinner=False)
def _load_dashboard_data(csv_path: str, as_of: date) -> DashboardData:
    """Load and cache dashboard data for a purchase log and reference date."""

    return prepare_dashboard_data(csv_path, today=as_of)


def main() -> None:
    """Application entrypoint for the BeanLedger dashboard."""

    st.set_page_config(
        page_title="BeanLedger | Coffee",
        page_icon="☕",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    settings = get_settings()
    configure_logging(settings.log_level)

    inject_css()
    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page)
    selection = render_sidebar_filters(date.today())

    try:
        data = _load_dashboard_data(str(settings.data_path), selection.as_of)
    except FileNotFoundError:
        st.info(f"No purchase log found at {settings.data_path}.")
        return
    except PurchaseDataError as exc:
        st.error(f"Could not read the purchase log: {exc}")
        return

    if active_page == "periods":
        render_periods_page(data, settings.currency_symbol)
    else:
        render_overview_page(data, selection.granularity, settings.currency_symbol)


if __name__ == "__main__":
    main()
