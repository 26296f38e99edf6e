"""
HTML views for the web route table.
Pages are rendered from small string templates; chart data is embedded as JSON
and drawn client-side with ECharts.
"""

import html
import json

from src.application.use_cases.load_exported_quotes import LoadExportedQuotesUseCase
from src.domain.entities.quote_row import QuoteRow

ECHARTS_CDN = "https://cdn.jsdelivr.net/npm/echarts@5/dist/echarts.min.js"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
{head}
</head>
<body>
<nav>{nav}</nav>
<main>
{body}
</main>
</body>
</html>
"""


def render_page(title: str, body: str, nav_links: list[tuple[str, str]], head: str = "") -> str:
    nav = " | ".join(
        f'<a href="{html.escape(path)}">{html.escape(label)}</a>' for path, label in nav_links
    )
    return _PAGE.format(title=html.escape(title), head=head, nav=nav, body=body)


def home_body(grouped: dict[str, list[QuoteRow]]) -> str:
    if not grouped:
        return "<h1>Stock quotes</h1>\n<p>No export found yet. Run the exporter first.</p>"
    items = "\n".join(
        f"<li>{html.escape(symbol)}: {len(rows)} days, "
        f"{html.escape(rows[0].date)} to {html.escape(rows[-1].date)}</li>"
        for symbol, rows in sorted(grouped.items())
    )
    return f"<h1>Stock quotes</h1>\n<ul>\n{items}\n</ul>"


def chart_series(grouped: dict[str, list[QuoteRow]]) -> list[dict]:
    """Build ECharts line series of closing prices, one per symbol."""
    return [
        {
            "name": symbol,
            "type": "line",
            "showSymbol": False,
            "data": [[row.date, float(row.close)] for row in rows],
        }
        for symbol, rows in sorted(grouped.items())
    ]


def example_body(grouped: dict[str, list[QuoteRow]]) -> str:
    if not grouped:
        return "<h1>Closing prices</h1>\n<p>Nothing to chart yet.</p>"
    option = {
        "tooltip": {"trigger": "axis"},
        "legend": {"data": sorted(grouped)},
        "xAxis": {"type": "time"},
        "yAxis": {"type": "value", "scale": True},
        "dataZoom": [{"type": "inside"}, {"type": "slider"}],
        "series": chart_series(grouped),
    }
    # "</" must not appear inside an inline script.
    payload = json.dumps(option).replace("</", "<\\/")
    return (
        "<h1>Closing prices</h1>\n"
        '<div id="chart" style="width: 100%; height: 480px;"></div>\n'
        "<script>\n"
        f"echarts.init(document.getElementById('chart')).setOption({payload});\n"
        "</script>"
    )


class QuoteViews:
    """View callables bound to the exported quotes."""

    def __init__(self, load_quotes: LoadExportedQuotesUseCase, nav_links: list[tuple[str, str]]) -> None:
        self._load_quotes = load_quotes
        self._nav_links = nav_links

    def home(self) -> str:
        return render_page("Home", home_body(self._load_quotes.execute()), self._nav_links)

    def example(self) -> str:
        return render_page(
            "Example",
            example_body(self._load_quotes.execute()),
            self._nav_links,
            head=f'<script src="{ECHARTS_CDN}"></script>',
        )
