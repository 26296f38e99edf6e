"""
FastAPI entry point for the web pages over the last export.

This module is the Composition Root for the web app: it wires the CSV store to
the application layer and mounts the route table. create_app() takes the reader
so tests can inject their own.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import BaseModel

from src.application.use_cases.load_exported_quotes import LoadExportedQuotesUseCase
from src.domain.entities.quote_row import QuoteRow
from src.domain.ports.quote_store_port import IQuoteReader
from src.infrastructure.storage.csv_quote_store import CsvQuoteStore
from src.infrastructure.web.router import build_router, build_routes, unreadable_export


class QuoteModel(BaseModel):
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int


class QuotesResponse(BaseModel):
    symbols: dict[str, list[QuoteModel]]


def create_app(reader: IQuoteReader) -> FastAPI:
    load_quotes = LoadExportedQuotesUseCase(reader)

    app = FastAPI(title="Stock Quote Exporter")
    app.include_router(build_router(build_routes(load_quotes)))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/quotes", response_model=QuotesResponse)
    def quotes(symbol: Optional[str] = None) -> QuotesResponse:
        """Exported rows grouped by symbol, oldest first."""
        try:
            grouped = load_quotes.execute(symbol)
            return _to_response(grouped)
        except ValueError as exc:
            raise unreadable_export(exc) from exc

    return app


def _to_response(grouped: dict[str, list[QuoteRow]]) -> QuotesResponse:
    return QuotesResponse(
        symbols={
            name: [
                QuoteModel(
                    date=row.date,
                    open=float(row.open),
                    high=float(row.high),
                    low=float(row.low),
                    close=float(row.close),
                    volume=int(float(row.volume)),
                )
                for row in rows
            ]
            for name, rows in grouped.items()
        }
    )


load_dotenv()
app = create_app(CsvQuoteStore(os.environ.get("STOCK_OUTPUT_PATH") or "stock_data.csv"))
