"""
Infrastructure adapter: local CSV file → IQuoteWriter / IQuoteReader.
The file is written in one pass at the end of an export run.
"""

import csv
import logging
import os
from typing import Iterable

from src.domain.entities.quote_row import QUOTE_ROW_HEADER, QuoteRow
from src.domain.ports.quote_store_port import IQuoteReader, IQuoteWriter

logger = logging.getLogger(__name__)


class CsvQuoteStore(IQuoteWriter, IQuoteReader):
    """Writes and reads `date,symbol,open,high,low,close,volume` CSV files."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def write(self, rows: Iterable[QuoteRow]) -> str:
        directory = os.path.dirname(self._path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self._path, "w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh)
            writer.writerow(QUOTE_ROW_HEADER)
            for row in rows:
                writer.writerow(row.as_csv_row())
        return self._path

    def read(self) -> list[QuoteRow]:
        if not os.path.exists(self._path):
            logger.info("No export found at %s", self._path)
            return []
        with open(self._path, newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh)
            header = next(reader, None)
            if header is None:
                return []
            if tuple(header) != QUOTE_ROW_HEADER:
                raise ValueError(f"Unexpected CSV header in {self._path}: {header!r}")
            return [QuoteRow.from_csv_row(row) for row in reader if row]
