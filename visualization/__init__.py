"""Visualization utilities for BeanLedger dashboards."""

from .charts import (
    build_cost_chart,
    build_grams_chart,
    build_period_timeline,
    build_rate_chart,
)
from .theme import theme_tokens

__all__ = [
    "build_cost_chart",
    "build_grams_chart",
    "build_period_timeline",
    "build_rate_chart",
    "theme_tokens",
]
