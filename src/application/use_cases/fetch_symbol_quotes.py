"""
Use-case: retrieve the full daily quote history for one symbol, most recent first.
Depends only on Domain ports and entities, no infrastructure imports.
"""

from src.domain.entities.quote_row import QuoteRow
from src.domain.ports.quote_provider_port import IQuoteProvider


class FetchSymbolQuotesUseCase:
    def __init__(self, provider: IQuoteProvider) -> None:
        self._provider = provider

    def execute(self, symbol: str) -> list[QuoteRow]:
        """Fetch daily quotes for *symbol* (uppercased), sorted by date descending.

        Raises:
            ValueError: if *symbol* is blank.
            QuoteProviderError: propagated from the IQuoteProvider.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        rows = self._provider.get_daily_quotes(symbol.upper().strip())
        return sorted(rows, key=lambda row: row.trade_date, reverse=True)
