"""
Declarative route table for the web pages.
Each Route maps a URL path to a named view; build_router() registers them on a
FastAPI APIRouter as HTML GET endpoints.
"""

from dataclasses import dataclass
from typing import Callable

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from src.application.use_cases.load_exported_quotes import LoadExportedQuotesUseCase
from src.infrastructure.web.views import QuoteViews


@dataclass(frozen=True)
class Route:
    path: str
    name: str
    view: Callable[[], str]


ROUTE_TABLE = (
    ("/", "home"),
    ("/example", "example"),
)


def build_routes(load_quotes: LoadExportedQuotesUseCase) -> list[Route]:
    nav_links = [(path, name.title()) for path, name in ROUTE_TABLE]
    views = QuoteViews(load_quotes, nav_links)
    return [Route(path=path, name=name, view=getattr(views, name)) for path, name in ROUTE_TABLE]


def build_router(routes: list[Route]) -> APIRouter:
    router = APIRouter()
    for route in routes:
        router.add_api_route(
            route.path,
            _html_endpoint(route.view),
            methods=["GET"],
            name=route.name,
            response_class=HTMLResponse,
        )
    return router


UNREADABLE_EXPORT_STATUS = 503


def unreadable_export(exc: ValueError) -> HTTPException:
    return HTTPException(
        status_code=UNREADABLE_EXPORT_STATUS,
        detail=f"The quote export cannot be read: {exc}",
    )


def _html_endpoint(view: Callable[[], str]):
    def endpoint() -> HTMLResponse:
        try:
            return HTMLResponse(view())
        except ValueError as exc:
            raise unreadable_export(exc) from exc

    return endpoint
