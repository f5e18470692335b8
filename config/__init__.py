"""Application configuration utilities."""

from .settings import (
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_SIMULTANEOUS_THRESHOLD,
    OZ_TO_GRAMS,
    Settings,
    configure_logging,
    get_settings,
)

__all__ = [
    "DEFAULT_LOOKBACK_DAYS",
    "DEFAULT_SIMULTANEOUS_THRESHOLD",
    "OZ_TO_GRAMS",
    "Settings",
    "configure_logging",
    "get_settings",
]
