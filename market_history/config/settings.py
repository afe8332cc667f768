"""Configuration for the Alpha Vantage client and its ambient services."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"


class AlphaVantageSettings(BaseSettings):
    """Configuration options for market-history."""

    alphavantage_api_key: str = Field(default="", description="Alpha Vantage API key")
    alphavantage_base_url: str = Field(default=DEFAULT_BASE_URL)
    http_timeout_seconds: float | None = Field(
        default=None,
        description="Timeout applied to outbound requests; None disables it.",
    )

    log_level: str = Field(default="INFO")

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="market-history")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        hidden = {"alphavantage_api_key"}
        return {k: ("***" if k in hidden else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AlphaVantageSettings:
    """Return cached settings with optional overrides."""

    if overrides:
        return AlphaVantageSettings(**overrides)
    return AlphaVantageSettings()


__all__ = [
    "AlphaVantageSettings",
    "DEFAULT_BASE_URL",
    "get_settings",
]
