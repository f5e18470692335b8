"""Shared layout primitives for the BeanLedger Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Iterable

import streamlit as st
from streamlit.components.v1 import html as components_html

GRANULARITIES: tuple[str, ...] = ("Monthly", "Yearly")


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("overview", "Dashboard", True),
    NavigationLink("periods", "Periods", True),
)


@dataclass(frozen=True)
class SidebarSelection:
    granularity: str
    as_of: date


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #EADFD6;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F5F5F5;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .bl-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .bl-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #6F4E37;
          }

          .bl-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .bl-nav__link,
          .bl-nav__link:visited {
            font-weight: 600;
            color: #5C6478;
            text-decoration: none;
          }

          .bl-nav__link.is-active {
            color: #6F4E37;
            border-bottom: 3px solid #6F4E37;
          }

          .bl-nav__link.is-disabled {
            color: #B7C1D9;
            pointer-events: none;
          }

          .bl-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .bl-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
          }

          .bl-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            font-weight: 600;
            color: #2C3E50;
          }

          .bl-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            background: #F3ECE6;
            color: #6F4E37;
          }

          .bl-insights {
            margin: 0;
            padding-left: 1.1rem;
            color: #4B5563;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable BeanLedger card."""

    chip_html = f'<span class="bl-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="bl-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="bl-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(active_page: str) -> None:
    """Render the dashboard navigation bar with active state."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "bl-nav__link"
        if link.slug == active_page:
            css_class += " is-active"
        if link.enabled:
            link_markup.append(
                f'<a class="{css_class}" href="?page={link.slug}" target="_self">{link.label}</a>'
            )
        else:
            link_markup.append(f'<span class="{css_class} is-disabled">{link.label}</span>')

    st.markdown(
        f"""
        <nav class="bl-nav">
            <div class="bl-nav__brand">BeanLedger</div>
            <div class="bl-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )
    _enforce_same_tab_navigation()


def render_sidebar_filters(default_as_of: date) -> SidebarSelection:
    """Render the sidebar filters and return the chosen granularity and date."""

    with st.sidebar:
        st.markdown("### Filters")
        granularity = st.radio("Aggregate by", GRANULARITIES, index=0, key="granularity")
        as_of = st.date_input("As of", value=default_as_of, key="as_of")
    return SidebarSelection(granularity=str(granularity), as_of=as_of)


def _enforce_same_tab_navigation() -> None:
    """Ensure navigation links stay within the same browser tab."""

    components_html(
        """
        <script>
        (function() {
          const anchors = window.parent.document.querySelectorAll('a.bl-nav__link');
          anchors.forEach((anchor) => { anchor.target = '_self'; });
        })();
        </script>
        """,
        height=0,
        width=0,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "overview")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "overview"
    st.session_state["active_page"] = page
    if params.get("page") != page:
        st.query_params["page"] = page
    return page


__all__ = [
    "GRANULARITIES",
    "NavigationLink",
    "NAV_LINKS",
    "SidebarSelection",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
    "render_sidebar_filters",
]
