"""
Use-case: read the last export back, grouped by symbol for charting.
"""

from typing import Optional

from src.domain.entities.quote_row import QuoteRow
from src.domain.ports.quote_store_port import IQuoteReader


class LoadExportedQuotesUseCase:
    def __init__(self, reader: IQuoteReader) -> None:
        self._reader = reader

    def execute(self, symbol: Optional[str] = None) -> dict[str, list[QuoteRow]]:
        """Return exported rows keyed by symbol, each list in ascending date order.

        Args:
            symbol: Only return this symbol (case-insensitive). All symbols when None.
        """
        wanted = symbol.upper().strip() if symbol else None
        grouped: dict[str, list[QuoteRow]] = {}
        for row in self._reader.read():
            if wanted and row.symbol != wanted:
                continue
            grouped.setdefault(row.symbol, []).append(row)
        for rows in grouped.values():
            rows.sort(key=lambda row: row.trade_date)
        return grouped
