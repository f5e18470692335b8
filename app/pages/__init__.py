"""Page modules for the BeanLedger Streamlit application."""

from .overview import render_page as render_overview_page
from .periods import render_page as render_periods_page

__all__ = [
    "render_overview_page",
    "render_periods_page",
]
