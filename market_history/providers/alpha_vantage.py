"""Alpha Vantage time-series query client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

import httpx

from market_history.config import DEFAULT_BASE_URL, get_settings

logger = logging.getLogger(__name__)

BASE_URL = DEFAULT_BASE_URL


class RangeFunction(str, Enum):
    """Time range function selecting the upstream time-series endpoint."""

    INTRADAY = "TIME_SERIES_INTRADAY"
    DAILY = "TIME_SERIES_DAILY"
    DAILY_ADJUSTED = "TIME_SERIES_DAILY_ADJUSTED"
    WEEKLY = "TIME_SERIES_WEEKLY"
    WEEKLY_ADJUSTED = "TIME_SERIES_WEEKLY_ADJUSTED"
    MONTHLY = "TIME_SERIES_MONTHLY"
    MONTHLY_ADJUSTED = "TIME_SERIES_MONTHLY_ADJUSTED"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[RangeFunction, str] = {
    RangeFunction.INTRADAY: "Intraday series, covering extended trading hours where applicable.",
    RangeFunction.DAILY: "Daily series covering 20+ years of history.",
    RangeFunction.DAILY_ADJUSTED: "Daily series with dividend/split adjusted close values.",
    RangeFunction.WEEKLY: "Weekly series covering 20+ years of history.",
    RangeFunction.WEEKLY_ADJUSTED: "Weekly series with dividend/split adjusted close values.",
    RangeFunction.MONTHLY: "Monthly series covering 20+ years of history.",
    RangeFunction.MONTHLY_ADJUSTED: "Monthly series with dividend/split adjusted close values.",
}


@dataclass(frozen=True, repr=False)
class QueryParameters:
    """Parameters of one time-series query, passed through verbatim."""

    function: RangeFunction
    symbol: str
    api_key: str
    interval: str
    output_size: str

    def __repr__(self) -> str:
        return (
            f"QueryParameters(function={self.function!s}, symbol={self.symbol!r}, "
            f"api_key='***', interval={self.interval!r}, output_size={self.output_size!r})"
        )


class AlphaVantageError(RuntimeError):
    """Raised when a query cannot produce a response body."""

    def __init__(self, message: str, query: QueryParameters) -> None:
        super().__init__(f"{message} for query {query!r}")
        self.query = query


class TransportError(AlphaVantageError):
    """The request could not be sent."""


class UnsuccessfulResponseError(AlphaVantageError):
    """The response status was not successful."""


class DecodeError(AlphaVantageError):
    """The response body could not be decoded as text."""


def build_query_url(params: QueryParameters, base_url: str = BASE_URL) -> str:
    """Render the query URL.

    Values are embedded as given, without percent-encoding; reserved characters
    such as ``&`` or ``#`` in a value will corrupt the query string.
    """

    function = RangeFunction(params.function)
    return (
        f"{base_url}?function={function.value}&symbol={params.symbol}"
        f"&apikey={params.api_key}&interval={params.interval}&outputsize={params.output_size}"
    )


async def execute_query(
    params: QueryParameters,
    *,
    client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> str:
    """Send one GET request for ``params`` and return the response body as text.

    An injected ``client`` is used as configured and left open. Otherwise a
    client is created for this call only, following redirects, with ``timeout``
    (None disables it).
    """

    url = build_query_url(params, base_url or BASE_URL)
    logger.debug("Requesting Alpha Vantage query %r", params)
    if client is None:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
            response = await _send(owned, url, params)
    else:
        response = await _send(client, url, params)

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        error = UnsuccessfulResponseError(f"Unsuccessful status {response.status_code}", params)
        logger.warning("%s", error)
        raise error from exc

    encoding = response.charset_encoding or "utf-8"
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        error = DecodeError(f"Failed to get response text ({encoding})", params)
        logger.warning("%s", error)
        raise error from exc


async def _send(client: httpx.AsyncClient, url: str, params: QueryParameters) -> httpx.Response:
    try:
        return await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        error = TransportError(f"Failed to send request ({exc.__class__.__name__}: {exc})", params)
        logger.warning("%s", error)
        raise error from exc


class AlphaVantageClient:
    """Query client bound to a configured API key and optional shared httpx client."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.alphavantage_api_key
        self._base_url = base_url or settings.alphavantage_base_url
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.http_timeout_seconds
        self._client = client
        if not self._api_key:
            logger.warning("ALPHAVANTAGE_API_KEY not set")

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_query(
        self,
        function: RangeFunction,
        symbol: str,
        interval: str,
        output_size: str,
    ) -> QueryParameters:
        return QueryParameters(
            function=function,
            symbol=symbol,
            api_key=self._api_key,
            interval=interval,
            output_size=output_size,
        )

    async def execute(self, params: QueryParameters) -> str:
        return await execute_query(
            params,
            client=self._client,
            base_url=self._base_url,
            timeout=self._timeout,
        )

    async def query(
        self,
        function: RangeFunction,
        symbol: str,
        interval: str,
        output_size: str,
    ) -> str:
        """Build a query with the configured API key and execute it."""

        return await self.execute(self.build_query(function, symbol, interval, output_size))


@lru_cache(maxsize=1)
def get_alpha_vantage_client() -> AlphaVantageClient:
    """Return a client configured from settings."""

    return AlphaVantageClient()


__all__ = [
    "AlphaVantageClient",
    "AlphaVantageError",
    "BASE_URL",
    "DecodeError",
    "QueryParameters",
    "RangeFunction",
    "TransportError",
    "UnsuccessfulResponseError",
    "build_query_url",
    "execute_query",
    "get_alpha_vantage_client",
]
