import pytest
from fastapi.testclient import TestClient

from fakes import make_rows
from src.domain.ports.quote_store_port import IQuoteReader
from src.infrastructure.entrypoints.fastapi_app import create_app
from src.infrastructure.storage.csv_quote_store import CsvQuoteStore


class MemoryReader(IQuoteReader):
    def __init__(self, rows):
        self._rows = rows

    def read(self):
        return list(self._rows)


@pytest.fixture
def client():
    rows = make_rows("AAPL", "2024-01-03", "2024-01-02") + make_rows("MSFT", "2024-01-02")
    return TestClient(create_app(MemoryReader(rows)))


def test_route_table_exposes_home_and_example(client):
    assert client.app.url_path_for("home") == "/"
    assert client.app.url_path_for("example") == "/example"


def test_home_lists_exported_symbols(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "AAPL: 2 days, 2024-01-02 to 2024-01-03" in response.text
    assert 'href="/example"' in response.text


def test_example_renders_chart(client):
    response = client.get("/example")
    assert response.status_code == 200
    assert "echarts.init" in response.text
    assert '"name": "MSFT"' in response.text


def test_pages_without_export_show_empty_state():
    client = TestClient(create_app(MemoryReader([])))
    assert "No export found yet" in client.get("/").text
    assert "Nothing to chart yet" in client.get("/example").text


def test_api_quotes_groups_ascending_and_filters(client):
    body = client.get("/api/quotes").json()
    assert [q["date"] for q in body["symbols"]["AAPL"]] == ["2024-01-02", "2024-01-03"]
    assert body["symbols"]["AAPL"][0]["close"] == 1.5

    filtered = client.get("/api/quotes", params={"symbol": "msft"}).json()
    assert list(filtered["symbols"]) == ["MSFT"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class BrokenReader(IQuoteReader):
    def read(self):
        raise ValueError("Unexpected CSV header in stock_data.csv: ['a', 'b']")


@pytest.mark.parametrize("path", ["/", "/example", "/api/quotes"])
def test_unreadable_export_returns_clear_error(path):
    client = TestClient(create_app(BrokenReader()))

    response = client.get(path)

    assert response.status_code == 503
    assert "cannot be read" in response.json()["detail"]


def test_foreign_csv_file_is_reported(tmp_path):
    path = tmp_path / "stock_data.csv"
    path.write_text("a,b,c\n1,2,3\n", encoding="utf-8")
    client = TestClient(create_app(CsvQuoteStore(str(path))))

    response = client.get("/api/quotes")

    assert response.status_code == 503
    assert "Unexpected CSV header" in response.json()["detail"]
