"""
Ports (interfaces) for persisting exported quote rows.
Infrastructure adapters (e.g. CsvQuoteStore) must implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from src.domain.entities.quote_row import QuoteRow


class IQuoteWriter(ABC):
    @abstractmethod
    def write(self, rows: Iterable[QuoteRow]) -> str:
        """Write a header followed by *rows*. Returns the location written to."""
        ...


class IQuoteReader(ABC):
    @abstractmethod
    def read(self) -> list[QuoteRow]:
        """Read previously exported rows. Returns [] when nothing was exported yet."""
        ...
