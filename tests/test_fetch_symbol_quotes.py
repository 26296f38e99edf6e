import pytest

from fakes import FakeProvider, make_rows
from src.application.use_cases.fetch_symbol_quotes import FetchSymbolQuotesUseCase
from src.domain.errors import QuoteDataUnavailableError


def test_rows_are_strictly_descending_by_date():
    provider = FakeProvider({"MSFT": make_rows("MSFT", "2024-01-03", "2023-12-29", "2024-01-05", "2024-01-04")})

    rows = FetchSymbolQuotesUseCase(provider).execute("MSFT")

    dates = [row.date for row in rows]
    assert dates == ["2024-01-05", "2024-01-04", "2024-01-03", "2023-12-29"]
    assert all(a.trade_date > b.trade_date for a, b in zip(rows, rows[1:]))


def test_symbol_is_normalised_before_calling_provider():
    provider = FakeProvider({"AAPL": make_rows("AAPL", "2024-01-02")})

    FetchSymbolQuotesUseCase(provider).execute("  aapl ")

    assert provider.calls == ["AAPL"]


@pytest.mark.parametrize("symbol", ["", "   "])
def test_blank_symbol_is_rejected(symbol):
    provider = FakeProvider({})
    with pytest.raises(ValueError):
        FetchSymbolQuotesUseCase(provider).execute(symbol)
    assert provider.calls == []


def test_provider_errors_propagate():
    with pytest.raises(QuoteDataUnavailableError):
        FetchSymbolQuotesUseCase(FakeProvider({})).execute("FB")
