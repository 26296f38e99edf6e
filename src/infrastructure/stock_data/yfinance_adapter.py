"""
Infrastructure adapter: yfinance → IQuoteProvider.
An alternate provider that needs no API key. All yfinance-specific details
(Ticker.history(), DataFrame column names) are confined here; the rest of the
codebase depends only on IQuoteProvider.
"""

import yfinance as yf

from src.domain.entities.quote_row import QuoteRow
from src.domain.errors import QuoteDataUnavailableError, QuoteProviderError
from src.domain.ports.quote_provider_port import IQuoteProvider


class YFinanceQuoteProvider(IQuoteProvider):
    """Fetches daily quotes from Yahoo Finance via the yfinance library."""

    def __init__(self, period: str = "max") -> None:
        self._period = period

    def get_daily_quotes(self, symbol: str) -> list[QuoteRow]:
        try:
            history = yf.Ticker(symbol).history(period=self._period, interval="1d")
        except Exception as exc:
            raise QuoteProviderError(symbol, f"yfinance request failed: {exc}") from exc

        if history is None or history.empty:
            raise QuoteDataUnavailableError(symbol)

        return [
            QuoteRow(
                date=date.strftime("%Y-%m-%d"),
                symbol=symbol,
                open=f"{float(row['Open']):.4f}",
                high=f"{float(row['High']):.4f}",
                low=f"{float(row['Low']):.4f}",
                close=f"{float(row['Close']):.4f}",
                volume=str(int(row["Volume"])),
            )
            for date, row in history.iterrows()
        ]
