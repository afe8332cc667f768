"""Value types describing a historical price series."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence


@dataclass(frozen=True)
class HistoricalMetaData:
    """Descriptive fields reported alongside a time-series query result."""

    information: str
    symbol: str
    last_refreshed: str
    interval: str
    output_size: str
    time_zone: str


@dataclass(frozen=True)
class HistoricalPrice:
    """One timestamped OHLCV sample.

    Bounds such as ``low <= close <= high`` are not checked here.
    """

    time: datetime
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class HistoricalData:
    """Metadata plus the price points of a series, oldest first."""

    meta_data: HistoricalMetaData
    time_series: Sequence[HistoricalPrice]

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_series", tuple(self.time_series))
