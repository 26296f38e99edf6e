"""
CLI entry point for the batch quote exporter.

This module is the Composition Root for the export use-case: it loads settings
(.env, optional Secrets Manager bootstrap), wires the provider, CSV store and
rate limiter into ExportQuotesService and triggers a single run.

Run:
    export ALPHA_VANTAGE_API_KEY=<key>
    python -m src.infrastructure.entrypoints.export_cli --symbols AAPL MSFT
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from src.application.services.quote_exporter import ExportQuotesService
from src.domain.ports.quote_provider_port import IQuoteProvider
from src.domain.ports.secret_store_port import ISecretStore
from src.infrastructure.config.settings import (
    OUTPUT_SIZES,
    PROVIDERS,
    ExporterSettings,
    parse_symbols,
)
from src.infrastructure.rate_limit.interval_limiter import IntervalRateLimiter
from src.infrastructure.storage.csv_quote_store import CsvQuoteStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="export-quotes",
        description="Fetch daily quotes for a list of symbols and write them to one CSV file.",
    )
    parser.add_argument(
        "--symbols",
        nargs="*",
        help="Ticker symbols (space or comma separated). Defaults to STOCK_SYMBOLS.",
    )
    parser.add_argument("--output", help="CSV file to write. Defaults to STOCK_OUTPUT_PATH.")
    parser.add_argument("--provider", choices=PROVIDERS)
    parser.add_argument("--output-size", choices=OUTPUT_SIZES)
    parser.add_argument("--max-workers", type=int, help="Upper bound on concurrent fetches.")
    parser.add_argument(
        "--min-interval",
        type=float,
        help="Minimum seconds between two outbound requests (0 disables).",
    )
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def build_secret_store() -> ISecretStore:
    from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter

    return SecretsManagerAdapter()


def load_settings(args: argparse.Namespace) -> ExporterSettings:
    settings = ExporterSettings.from_env()
    if settings.secret_arn:
        build_secret_store().load_into_env(settings.secret_arn)
        settings = ExporterSettings.from_env()

    symbols = None
    if args.symbols is not None:
        symbols = parse_symbols(",".join(args.symbols))
    return settings.with_overrides(
        symbols=symbols,
        output_path=args.output,
        provider=args.provider,
        output_size=args.output_size,
        max_workers=args.max_workers,
        min_interval=args.min_interval,
        log_level=args.log_level,
    )


def build_provider(settings: ExporterSettings) -> IQuoteProvider:
    if settings.provider == "yfinance":
        from src.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider

        return YFinanceQuoteProvider()

    from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageQuoteProvider

    return AlphaVantageQuoteProvider(
        api_key=settings.api_key,
        output_size=settings.output_size,
        timeout=settings.request_timeout,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or os.environ.get("LOG_LEVEL") or "INFO")

    try:
        settings = load_settings(args)
        provider = build_provider(settings)
    except ValueError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG_ERROR

    service = ExportQuotesService(
        provider=provider,
        writer=CsvQuoteStore(settings.output_path),
        rate_limiter=IntervalRateLimiter(settings.min_interval),
        max_workers=settings.max_workers,
    )
    logger.info(
        "Exporting %d symbol(s) via %s: %s",
        len(settings.symbols),
        settings.provider,
        ", ".join(settings.symbols) or "-",
    )
    report = service.export(settings.symbols)

    print(
        f"Fetched data completely! {report.row_count} rows from "
        f"{len(report.succeeded)} of {report.symbol_count} symbols written to {report.output_path}"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
