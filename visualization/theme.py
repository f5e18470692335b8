"""Shared Plotly theme tokens for BeanLedger visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    time_format: str = "%d %b %Y"
    label_font: str = "Inter"
    coffee_brown: str = "rgba(111, 78, 55, 0.7)"
    coffee_brown_line: str = "rgba(111, 78, 55, 1)"
    cost_green: str = "rgba(46, 204, 113, 0.7)"
    cost_green_line: str = "rgba(46, 204, 113, 1)"
    projected_grey: str = "#94A3B8"
    neutral_grey: str = "#94A3B8"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between charts and other
    Plotly artefacts.
    """

    return _TOKENS
