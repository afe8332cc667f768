"""Alpha Vantage time-series client and historical price value types.

Applications call ``setup_logging()`` and ``setup_telemetry(get_settings())``
once at startup, then query through ``AlphaVantageClient`` or ``execute_query``.
"""

from .config import get_settings
from .core.logging import setup_logging
from .core.telemetry import setup_telemetry
from .models import HistoricalData, HistoricalMetaData, HistoricalPrice
from .providers.alpha_vantage import (
    AlphaVantageClient,
    AlphaVantageError,
    DecodeError,
    QueryParameters,
    RangeFunction,
    TransportError,
    UnsuccessfulResponseError,
    build_query_url,
    execute_query,
)

__all__ = [
    "AlphaVantageClient",
    "AlphaVantageError",
    "DecodeError",
    "HistoricalData",
    "HistoricalMetaData",
    "HistoricalPrice",
    "QueryParameters",
    "RangeFunction",
    "TransportError",
    "UnsuccessfulResponseError",
    "build_query_url",
    "execute_query",
    "get_settings",
    "setup_logging",
    "setup_telemetry",
]
