"""
Exporter configuration read from environment variables.
The entrypoint calls python-dotenv's load_dotenv() before from_env(), so a local
.env file behaves exactly like exported variables.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from src.infrastructure.rate_limit.interval_limiter import DEFAULT_MIN_INTERVAL

DEFAULT_SYMBOLS = ("AAPL", "GOOGL", "MSFT", "AMZN", "FB")
PROVIDERS = ("alphavantage", "yfinance")
OUTPUT_SIZES = ("full", "compact")


def parse_symbols(raw: str) -> tuple[str, ...]:
    """Split a comma separated list into unique, uppercased symbols (order kept)."""
    seen: dict[str, None] = {}
    for part in raw.split(","):
        symbol = part.strip().upper()
        if symbol:
            seen.setdefault(symbol, None)
    return tuple(seen)


@dataclass(frozen=True)
class ExporterSettings:
    api_key: Optional[str] = None
    secret_arn: Optional[str] = None
    symbols: tuple[str, ...] = DEFAULT_SYMBOLS
    output_path: str = "stock_data.csv"
    provider: str = "alphavantage"
    output_size: str = "full"
    max_workers: int = 5
    min_interval: float = DEFAULT_MIN_INTERVAL
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExporterSettings":
        env = os.environ if environ is None else environ
        raw_symbols = env.get("STOCK_SYMBOLS")
        settings = cls(
            api_key=env.get("ALPHA_VANTAGE_API_KEY") or None,
            secret_arn=env.get("ALPHA_VANTAGE_SECRET_ARN") or None,
            symbols=DEFAULT_SYMBOLS if raw_symbols is None else parse_symbols(raw_symbols),
            output_path=env.get("STOCK_OUTPUT_PATH") or cls.output_path,
            provider=(env.get("STOCK_PROVIDER") or cls.provider).lower(),
            output_size=(env.get("STOCK_OUTPUT_SIZE") or cls.output_size).lower(),
            max_workers=_number(env, "STOCK_MAX_WORKERS", int, cls.max_workers),
            min_interval=_number(env, "STOCK_MIN_INTERVAL", float, cls.min_interval),
            request_timeout=_number(env, "STOCK_REQUEST_TIMEOUT", float, cls.request_timeout),
            log_level=(env.get("LOG_LEVEL") or cls.log_level).upper(),
        )
        settings.validate()
        return settings

    def with_overrides(self, **overrides) -> "ExporterSettings":
        """Return a copy with every non-None override applied."""
        settings = replace(self, **{k: v for k, v in overrides.items() if v is not None})
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"STOCK_PROVIDER must be one of {PROVIDERS}, got {self.provider!r}")
        if self.output_size not in OUTPUT_SIZES:
            raise ValueError(
                f"STOCK_OUTPUT_SIZE must be one of {OUTPUT_SIZES}, got {self.output_size!r}"
            )
        if self.max_workers < 1:
            raise ValueError("STOCK_MAX_WORKERS must be >= 1")
        if self.min_interval < 0:
            raise ValueError("STOCK_MIN_INTERVAL must be >= 0")
        if self.request_timeout <= 0:
            raise ValueError("STOCK_REQUEST_TIMEOUT must be > 0")


def _number(env: Mapping[str, str], name: str, kind, default):
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from exc
