"""
Port (interface) for daily quote providers.
Infrastructure adapters (e.g. AlphaVantageQuoteProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.quote_row import QuoteRow


class IQuoteProvider(ABC):
    @abstractmethod
    def get_daily_quotes(self, symbol: str) -> list[QuoteRow]:
        """Return every daily quote the provider has for *symbol*, in any order.

        Raises:
            QuoteProviderError: if quotes for *symbol* cannot be obtained.
        """
        ...
