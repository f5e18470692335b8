"""Centralised configuration handling for BeanLedger."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SIMULTANEOUS_THRESHOLD = 3.0
DEFAULT_LOOKBACK_DAYS = 30
OZ_TO_GRAMS = 28.3495

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_PATH = BASE_DIR / "data" / "coffee.csv"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    simultaneous_threshold: float = Field(default=DEFAULT_SIMULTANEOUS_THRESHOLD, gt=0)
    lookback_days: int = Field(default=DEFAULT_LOOKBACK_DAYS, ge=1)
    grams_per_unit: float = Field(default=OZ_TO_GRAMS, gt=0)
    currency_symbol: str = "$"
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BEANLEDGER_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("beanledger")
    if secrets_section:
        overrides = {
            "simultaneous_threshold": secrets_section.get("simultaneous_threshold"),
            "lookback_days": secrets_section.get("lookback_days"),
            "grams_per_unit": secrets_section.get("grams_per_unit"),
            "currency_symbol": secrets_section.get("currency_symbol"),
            "data_path": secrets_section.get("data_path"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def configure_logging(level: str | int | None = None) -> None:
    """Attach a basic stream handler to the root logger."""

    resolved = level if level is not None else get_settings().log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
