"""
Infrastructure adapter: Alpha Vantage TIME_SERIES_DAILY → IQuoteProvider.
All Alpha Vantage specifics (query parameters, JSON field names, informational
"Note" payloads returned when the rate limit is hit) are confined here; the rest
of the codebase depends only on IQuoteProvider.
"""

from typing import Optional

import requests

from src.domain.entities.quote_row import QuoteRow
from src.domain.errors import (
    MissingCredentialError,
    QuoteDataUnavailableError,
    QuoteProviderError,
)
from src.domain.ports.quote_provider_port import IQuoteProvider

TIME_SERIES_KEY = "Time Series (Daily)"
_MESSAGE_KEYS = ("Error Message", "Note", "Information")


class AlphaVantageQuoteProvider(IQuoteProvider):
    """Fetches the daily time series of a symbol from the Alpha Vantage REST API."""

    BASE_URL = "https://www.alphavantage.co/query"
    OUTPUT_SIZES = ("full", "compact")

    def __init__(
        self,
        api_key: Optional[str],
        output_size: str = "full",
        timeout: float = 30,
        base_url: str = BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise MissingCredentialError(
                "ALPHA_VANTAGE_API_KEY is not set; cannot query Alpha Vantage."
            )
        if output_size not in self.OUTPUT_SIZES:
            raise ValueError(
                f"output_size must be one of {self.OUTPUT_SIZES}, got {output_size!r}"
            )
        self._api_key = api_key.strip()
        self._output_size = output_size
        self._timeout = timeout
        self._base_url = base_url
        self._session = session or requests.Session()

    def get_daily_quotes(self, symbol: str) -> list[QuoteRow]:
        payload = self._request(symbol)

        series = payload.get(TIME_SERIES_KEY) if isinstance(payload, dict) else None
        if not isinstance(series, dict):
            raise QuoteDataUnavailableError(symbol, _provider_message(payload))

        try:
            return [
                QuoteRow(
                    date=day,
                    symbol=symbol,
                    open=values["1. open"],
                    high=values["2. high"],
                    low=values["3. low"],
                    close=values["4. close"],
                    volume=values["5. volume"],
                )
                for day, values in series.items()
            ]
        except (KeyError, TypeError) as exc:
            raise QuoteProviderError(symbol, f"malformed daily entry: {exc!r}") from exc

    def _request(self, symbol: str):
        params = {
            "function": "TIME_SERIES_DAILY",
            "symbol": symbol,
            "outputsize": self._output_size,
            "apikey": self._api_key,
        }
        try:
            response = self._session.get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise QuoteProviderError(symbol, f"request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise QuoteProviderError(symbol, "response body is not valid JSON") from exc


def _provider_message(payload) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    for key in _MESSAGE_KEYS:
        if payload.get(key):
            return str(payload[key])
    return None
