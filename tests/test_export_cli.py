import csv

import pytest

from fakes import FakeProvider, make_rows
from src.infrastructure.entrypoints import export_cli
from src.infrastructure.stock_data.alpha_vantage_adapter import AlphaVantageQuoteProvider
from src.infrastructure.stock_data.yfinance_adapter import YFinanceQuoteProvider

_ENV_VARS = (
    "ALPHA_VANTAGE_API_KEY",
    "ALPHA_VANTAGE_SECRET_ARN",
    "STOCK_SYMBOLS",
    "STOCK_OUTPUT_PATH",
    "STOCK_PROVIDER",
    "STOCK_OUTPUT_SIZE",
    "STOCK_MAX_WORKERS",
    "STOCK_MIN_INTERVAL",
    "STOCK_REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(export_cli, "load_dotenv", lambda: False)


def test_missing_api_key_exits_without_writing(tmp_path, caplog):
    out = tmp_path / "stock_data.csv"

    code = export_cli.main(["--output", str(out), "--min-interval", "0"])

    assert code == export_cli.EXIT_CONFIG_ERROR
    assert not out.exists()
    assert "ALPHA_VANTAGE_API_KEY" in caplog.text


def test_run_writes_successful_symbols_only(tmp_path, monkeypatch, capsys):
    out = tmp_path / "stock_data.csv"
    provider = FakeProvider({"AAPL": make_rows("AAPL", "2024-01-02", "2024-01-03")})
    monkeypatch.setattr(export_cli, "build_provider", lambda settings: provider)

    code = export_cli.main(
        ["--symbols", "aapl,FB", "--output", str(out), "--min-interval", "0"]
    )

    assert code == export_cli.EXIT_OK
    with open(out, newline="", encoding="utf-8") as fh:
        lines = list(csv.reader(fh))
    assert lines[0] == ["date", "symbol", "open", "high", "low", "close", "volume"]
    assert [line[:2] for line in lines[1:]] == [["2024-01-03", "AAPL"], ["2024-01-02", "AAPL"]]
    assert sorted(provider.calls) == ["AAPL", "FB"]
    assert "Fetched data completely!" in capsys.readouterr().out


def test_empty_symbols_flag_writes_header_only(tmp_path, monkeypatch):
    out = tmp_path / "stock_data.csv"
    monkeypatch.setattr(export_cli, "build_provider", lambda settings: FakeProvider({}))

    code = export_cli.main(["--symbols", "--output", str(out)])

    assert code == export_cli.EXIT_OK
    assert out.read_text(encoding="utf-8").splitlines() == ["date,symbol,open,high,low,close,volume"]


def test_symbols_fall_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCK_SYMBOLS", "ibm")
    args = export_cli.build_parser().parse_args([])
    assert export_cli.load_settings(args).symbols == ("IBM",)


def test_build_provider_selects_adapter():
    settings = export_cli.ExporterSettings(api_key="demo")
    assert isinstance(export_cli.build_provider(settings), AlphaVantageQuoteProvider)
    yf_settings = settings.with_overrides(provider="yfinance")
    assert isinstance(export_cli.build_provider(yf_settings), YFinanceQuoteProvider)


def test_secret_arn_bootstraps_environment(monkeypatch):
    from src.infrastructure.secrets import secrets_manager_adapter

    class FakeAdapter:
        def __init__(self, region=None):
            pass

        def load_into_env(self, secret_id):
            monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", f"from-{secret_id}")
            return ["ALPHA_VANTAGE_API_KEY"]

    monkeypatch.setattr(secrets_manager_adapter, "SecretsManagerAdapter", FakeAdapter)
    monkeypatch.setenv("ALPHA_VANTAGE_SECRET_ARN", "arn:test")

    settings = export_cli.load_settings(export_cli.build_parser().parse_args([]))

    assert settings.api_key == "from-arn:test"


@pytest.mark.parametrize(
    "name, value",
    [("STOCK_OUTPUT_SIZE", "huge"), ("STOCK_MAX_WORKERS", "many"), ("STOCK_MIN_INTERVAL", "-1")],
)
def test_invalid_configuration_exits_with_config_error(tmp_path, monkeypatch, caplog, name, value):
    out = tmp_path / "stock_data.csv"
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "demo")
    monkeypatch.setenv(name, value)

    code = export_cli.main(["--output", str(out)])

    assert code == export_cli.EXIT_CONFIG_ERROR
    assert not out.exists()
    assert name in caplog.text


def test_logging_is_configured_before_secret_bootstrap(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(export_cli, "configure_logging", lambda level: calls.append(("logging", level)))

    def fake_load_settings(args):
        calls.append(("settings", None))
        raise ValueError("stop here")

    monkeypatch.setattr(export_cli, "load_settings", fake_load_settings)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert export_cli.main(["--output", str(tmp_path / "x.csv")]) == export_cli.EXIT_CONFIG_ERROR
    assert calls == [("logging", "DEBUG"), ("settings", None)]
