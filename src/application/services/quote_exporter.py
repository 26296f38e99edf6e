"""
Application service: the batch exporter.
Business decisions owned here:
  - Fan-out: one task per symbol on a bounded worker pool, joined before writing.
  - Failure policy: a symbol whose fetch fails is logged and left out of the
    export; the other symbols carry on.
  - Flow: fetch (rate limited) → sort → merge in completion order → write once.

Infrastructure adapters (IQuoteProvider, IQuoteWriter, IRateLimiter) are injected;
no imports from requests, yfinance, csv or any other I/O library appear here.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Iterable

from src.application.use_cases.fetch_symbol_quotes import FetchSymbolQuotesUseCase
from src.domain.entities.export_report import ExportReport
from src.domain.entities.quote_row import QuoteRow
from src.domain.errors import QuoteProviderError
from src.domain.ports.quote_provider_port import IQuoteProvider
from src.domain.ports.quote_store_port import IQuoteWriter
from src.domain.ports.rate_limiter_port import IRateLimiter

logger = logging.getLogger(__name__)


class ExportQuotesService:
    DEFAULT_MAX_WORKERS: int = 5

    def __init__(
        self,
        provider: IQuoteProvider,
        writer: IQuoteWriter,
        rate_limiter: IRateLimiter,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._fetch = FetchSymbolQuotesUseCase(provider)
        self._writer = writer
        self._rate_limiter = rate_limiter
        self._max_workers = max(1, max_workers)

    def export(self, symbols: Iterable[str]) -> ExportReport:
        """Fetch every symbol and write the merged rows with a single header.

        Args:
            symbols: Ticker symbols to export. May be empty. Symbols are uppercased,
                     blanks dropped and duplicates fetched once.

        Returns:
            ExportReport with the output location, row count and per-symbol outcome.
        """
        symbols = _normalise(symbols)
        all_rows: list[QuoteRow] = []
        succeeded: list[str] = []
        failed: dict[str, str] = {}

        if symbols:
            with ThreadPoolExecutor(
                max_workers=min(self._max_workers, len(symbols)),
                thread_name_prefix="quote-fetch",
            ) as pool:
                futures: dict[Future, str] = {
                    pool.submit(self._fetch_one, symbol): symbol for symbol in symbols
                }
                for future in as_completed(futures):
                    symbol = futures[future]
                    try:
                        rows = future.result()
                    except (QuoteProviderError, ValueError) as exc:
                        logger.error("Failed to fetch data: %s (%s)", symbol, exc)
                        failed[symbol] = str(exc)
                        continue
                    all_rows.extend(rows)
                    succeeded.append(symbol)
                    logger.info("Fetched %s (%d rows)", symbol, len(rows))

        output_path = self._writer.write(all_rows)
        logger.info(
            "Wrote %d rows for %d of %d symbols to %s",
            len(all_rows),
            len(succeeded),
            len(symbols),
            output_path,
        )
        return ExportReport(
            output_path=output_path,
            row_count=len(all_rows),
            succeeded=tuple(succeeded),
            failed=failed,
        )

    def _fetch_one(self, symbol: str) -> list[QuoteRow]:
        self._rate_limiter.acquire()
        return self._fetch.execute(symbol)


def _normalise(symbols: Iterable[str]) -> list[str]:
    """Strip and uppercase, drop blanks and keep the first of any duplicates."""
    seen: dict[str, None] = {}
    for symbol in symbols:
        cleaned = symbol.strip().upper()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)
