# ABOUTME: ASGI web entry point exposing the weather lookup as a JSON endpoint.
# ABOUTME: Builds a Starlette app that maps lookup errors onto HTTP statuses.

import contextlib
import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from clima.config import Settings, configure_logging, load_settings
from clima.deps import LookupDeps, create_http_client
from clima.display import build_view
from clima.errors import (
    EmptyQueryError,
    LocationNotFoundError,
    MalformedResponseError,
    NetworkFailureError,
    RateLimitedError,
    UpstreamError,
    WeatherLookupError,
)
from clima.weather_service import lookup

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[WeatherLookupError], int] = {
    EmptyQueryError: 400,
    LocationNotFoundError: 404,
    RateLimitedError: 429,
    UpstreamError: 502,
    MalformedResponseError: 502,
    NetworkFailureError: 503,
}


def local_now(tz_name: str | None) -> datetime:
    """Current wall-clock time in the report's timezone, falling back to UTC."""
    if not tz_name:
        return datetime.now(timezone.utc)
    try:
        return datetime.now(ZoneInfo(tz_name))
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", tz_name)
        return datetime.now(timezone.utc)


def error_response(exc: WeatherLookupError) -> JSONResponse:
    status = ERROR_STATUS.get(type(exc), 500)
    return JSONResponse({"error": exc.user_message, "kind": exc.kind}, status_code=status)


async def weather(request: Request) -> JSONResponse:
    deps: LookupDeps = request.app.state.deps
    city = request.query_params.get("city", "")
    try:
        report = await lookup(
            deps.http_client,
            city,
            geocoding_url=deps.settings.geocoding_url,
            forecast_url=deps.settings.forecast_url,
        )
    except WeatherLookupError as e:
        logger.info("Lookup for %r failed: %s", city, e.kind)
        return error_response(e)
    except Exception:
        logger.exception("Unexpected failure looking up %r", city)
        raise

    view = build_view(report, local_now(report.timezone))
    return JSONResponse(view.model_dump(mode="json"))


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_app(settings: Settings | None = None, client: httpx.AsyncClient | None = None) -> Starlette:
    """Build the app. An injected client is left open on shutdown; an owned one is closed."""
    if settings is None:
        settings = load_settings()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        http_client = client if client is not None else create_http_client(settings)
        app.state.deps = LookupDeps(http_client=http_client, settings=settings)
        try:
            yield
        finally:
            if client is None:
                await http_client.aclose()

    return Starlette(
        routes=[
            Route("/api/weather", weather, methods=["GET"]),
            Route("/health", health, methods=["GET"]),
        ],
        lifespan=lifespan,
    )


def build_default_app() -> Starlette:
    """Entry point for ASGI servers: `uvicorn clima.web:build_default_app --factory`."""
    settings = load_settings()
    configure_logging(settings.log_level)
    return create_app(settings)
