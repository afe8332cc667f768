"""Configuration package for market-history."""

from .settings import DEFAULT_BASE_URL, AlphaVantageSettings, get_settings

__all__ = ["AlphaVantageSettings", "DEFAULT_BASE_URL", "get_settings"]
