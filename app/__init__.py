"""Streamlit application package for BeanLedger."""

from .main import main

__all__ = ["main"]
