"""
Domain entity for one day's quote of one symbol.
Zero external dependencies, pure Python dataclass only.
Values are kept as the provider sent them; no numeric re-formatting happens here.
"""

from dataclasses import dataclass
from datetime import date
from typing import Sequence

QUOTE_ROW_HEADER = ("date", "symbol", "open", "high", "low", "close", "volume")


@dataclass(frozen=True)
class QuoteRow:
    date: str
    symbol: str
    open: str
    high: str
    low: str
    close: str
    volume: str

    @property
    def trade_date(self) -> date:
        return date.fromisoformat(self.date)

    def as_csv_row(self) -> list[str]:
        return [
            self.date,
            self.symbol,
            self.open,
            self.high,
            self.low,
            self.close,
            self.volume,
        ]

    @classmethod
    def from_csv_row(cls, row: Sequence[str]) -> "QuoteRow":
        if len(row) != len(QUOTE_ROW_HEADER):
            raise ValueError(
                f"Expected {len(QUOTE_ROW_HEADER)} columns, got {len(row)}: {row!r}"
            )
        return cls(*row)
