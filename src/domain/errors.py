"""
Domain errors raised by quote providers and configuration.
Adapters translate library-specific failures into these so the application
layer never imports requests, yfinance or boto3.
"""

from typing import Optional


class QuoteProviderError(Exception):
    """A provider could not deliver quotes for one symbol."""

    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(f"{symbol}: {message}")
        self.symbol = symbol
        self.message = message


class QuoteDataUnavailableError(QuoteProviderError):
    """The provider answered, but without the expected daily time series."""

    def __init__(self, symbol: str, provider_message: Optional[str] = None) -> None:
        message = "response has no daily time series"
        if provider_message:
            message = f"{message} ({provider_message})"
        super().__init__(symbol, message)
        self.provider_message = provider_message


class MissingCredentialError(ValueError):
    """The provider API key is absent or blank."""
