# ABOUTME: Service layer for Open-Meteo geocoding and forecast calls and response normalization.
# ABOUTME: Maps HTTP and transport failures onto the lookup error taxonomy; never retries.

import logging
import math
from datetime import date, datetime

import httpx
from pydantic import ValidationError

from clima.errors import (
    EmptyQueryError,
    LocationNotFoundError,
    MalformedResponseError,
    NetworkFailureError,
    RateLimitedError,
    UpstreamError,
)
from clima.models import CurrentConditions, ForecastDay, GeoResult, WeatherReport

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

GEOCODING_LANGUAGE = "pt"
FORECAST_DAYS = 7

CURRENT_PARAMS = "temperature_2m,relative_humidity_2m,precipitation,wind_speed_10m,weathercode"

DAILY_PARAMS = (
    "weathercode,temperature_2m_max,temperature_2m_min,precipitation_sum,"
    "wind_speed_10m_max,relative_humidity_2m_max,relative_humidity_2m_min"
)


async def resolve(client: httpx.AsyncClient, query: str, url: str = GEOCODING_URL) -> GeoResult:
    """Geocode a place name to its top Open-Meteo match."""
    name = (query or "").strip()
    if not name:
        raise EmptyQueryError()

    data = await _get_json(
        client,
        url,
        {
            "name": name,
            "count": 1,
            "language": GEOCODING_LANGUAGE,
            "format": "json",
        },
    )

    results = data.get("results")
    if not results:
        logger.info("No geocoding match for %r", name)
        raise LocationNotFoundError(name)

    try:
        r = results[0]
        return GeoResult(
            latitude=r["latitude"],
            longitude=r["longitude"],
            display_name=r.get("name") or name,
            country=r.get("country"),
            timezone=r.get("timezone"),
        )
    except (KeyError, TypeError, AttributeError, ValidationError, ArithmeticError) as e:
        raise MalformedResponseError() from e


async def fetch_report(
    client: httpx.AsyncClient,
    geo: GeoResult,
    url: str = FORECAST_URL,
    forecast_days: int = FORECAST_DAYS,
) -> WeatherReport:
    """Fetch current conditions and the daily forecast for a resolved location."""
    data = await _get_json(
        client,
        url,
        {
            "latitude": geo.latitude,
            "longitude": geo.longitude,
            "current": CURRENT_PARAMS,
            "daily": DAILY_PARAMS,
            "forecast_days": forecast_days,
            "timezone": "auto",
        },
    )

    if not data.get("current") or not data.get("daily"):
        logger.warning("Forecast response missing current/daily sections: keys=%s", sorted(data))
        raise MalformedResponseError()

    try:
        return WeatherReport(
            place=geo.place,
            current=parse_current_data(data["current"]),
            forecast=parse_daily_data(data["daily"]),
            latitude=geo.latitude,
            longitude=geo.longitude,
            timezone=data.get("timezone") or geo.timezone,
        )
    except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError) as e:
        # pydantic's ValidationError is a ValueError; floor(inf) raises OverflowError
        logger.warning("Could not normalize forecast response: %s", e)
        raise MalformedResponseError() from e


async def lookup(
    client: httpx.AsyncClient,
    query: str,
    geocoding_url: str = GEOCODING_URL,
    forecast_url: str = FORECAST_URL,
) -> WeatherReport:
    """Resolve a place name, then fetch its report. The two calls run strictly in sequence."""
    geo = await resolve(client, query, url=geocoding_url)
    logger.debug("Resolved %r to %s (%s, %s)", query, geo.place, geo.latitude, geo.longitude)
    return await fetch_report(client, geo, url=forecast_url)


def parse_current_data(raw: dict) -> CurrentConditions:
    """Map the Open-Meteo 'current' section onto CurrentConditions."""
    precipitation = raw.get("precipitation")
    observed = raw.get("time")
    return CurrentConditions(
        temperature_c=raw["temperature_2m"],
        humidity_pct=_round_half_up(raw["relative_humidity_2m"]),
        precipitation_mm=0.0 if precipitation is None else precipitation,
        wind_kph=raw["wind_speed_10m"],
        weather_code=_weather_code(raw),
        observed_at=datetime.fromisoformat(observed) if observed else None,
    )


def parse_daily_data(raw: dict) -> list[ForecastDay]:
    """Parse Open-Meteo column-oriented daily data into row-oriented ForecastDay objects.

    Columns are zipped by position against 'time'. Upstream promises equal-length
    arrays but nothing here verifies it: a short or missing column leaves that
    field None for the affected days.
    """
    dates = raw.get("time") or []

    codes_key = "weathercode" if "weathercode" in raw else "weather_code"
    result = []
    for i, d in enumerate(dates):
        result.append(
            ForecastDay(
                date=date.fromisoformat(d),
                max_c=_get_at(raw, "temperature_2m_max", i),
                min_c=_get_at(raw, "temperature_2m_min", i),
                precipitation_mm=_get_at(raw, "precipitation_sum", i),
                wind_max_kph=_get_at(raw, "wind_speed_10m_max", i),
                humidity_avg_pct=_humidity_avg(
                    _get_at(raw, "relative_humidity_2m_max", i),
                    _get_at(raw, "relative_humidity_2m_min", i),
                ),
                weather_code=_get_at(raw, codes_key, i),
            )
        )
    return result


async def _get_json(client: httpx.AsyncClient, url: str, params: dict) -> dict:
    """Issue one GET and return the decoded JSON object, or raise a lookup error."""
    logger.debug("GET %s params=%s", url, params)
    try:
        resp = await client.get(url, params=params)
    except httpx.RequestError as e:
        logger.warning("Transport failure calling %s: %s", url, e)
        raise NetworkFailureError(e) from e

    if resp.status_code == 429:
        logger.warning("Rate limited by %s", url)
        raise RateLimitedError()
    if not resp.is_success:
        logger.warning("Upstream %s answered HTTP %s", url, resp.status_code)
        raise UpstreamError(resp.status_code)

    try:
        data = resp.json()
    except ValueError as e:
        raise MalformedResponseError() from e
    if not isinstance(data, dict):
        raise MalformedResponseError()
    return data


def _weather_code(raw: dict) -> int | None:
    if "weathercode" in raw:
        return raw["weathercode"]
    return raw.get("weather_code")


def _humidity_avg(high, low) -> int | None:
    if high is None or low is None:
        return None
    return _round_half_up((high + low) / 2)


def _round_half_up(value: float) -> int:
    # 62.5 -> 63; round() would give 62
    return math.floor(value + 0.5)


def _get_at(data: dict, key: str, index: int):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if col is None or index >= len(col):
        return None
    return col[index]
