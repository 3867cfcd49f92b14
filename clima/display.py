# ABOUTME: Display-ready view of a WeatherReport: page theme, current summary, forecast cards.
# ABOUTME: Formatting takes the current time as an argument so output is deterministic.

import math
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from clima.conditions import is_daytime, present, theme_for
from clima.models import ConditionPresentation, ForecastDay, WeatherReport

MISSING = "--"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class CurrentSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: str
    humidity: str
    precipitation: str
    wind: str
    condition: ConditionPresentation


class ForecastCard(BaseModel):
    """One per-day card, in forecast order."""

    model_config = ConfigDict(frozen=True)

    date: date
    day_label: str
    max_temperature: str
    min_temperature: str
    precipitation: str
    wind: str
    humidity: str
    condition: ConditionPresentation


class WeatherView(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: str
    place: str
    current: CurrentSummary
    forecast: list[ForecastCard] = []


def build_view(report: WeatherReport, now: datetime) -> WeatherView:
    """Build the view for a report as seen at `now` (local to the report)."""
    daytime = is_daytime(now)
    current = report.current
    return WeatherView(
        theme=theme_for(now),
        place=report.place,
        current=CurrentSummary(
            temperature=format_temperature(current.temperature_c),
            humidity=format_percent(current.humidity_pct),
            precipitation=format_precipitation(current.precipitation_mm),
            wind=format_wind(current.wind_kph),
            condition=present(current.weather_code, daytime),
        ),
        forecast=[build_card(day, now.date()) for day in report.forecast],
    )


def build_card(day: ForecastDay, today: date) -> ForecastCard:
    """Card for one forecast day. Daily summaries always use the daytime icon."""
    return ForecastCard(
        date=day.date,
        day_label=day_label(day.date, today),
        max_temperature=format_temperature(day.max_c),
        min_temperature=format_temperature(day.min_c),
        precipitation=format_precipitation(day.precipitation_mm),
        wind=format_wind(day.wind_max_kph),
        humidity=format_percent(day.humidity_avg_pct),
        condition=present(day.weather_code, is_daytime=True),
    )


def day_label(day: date, today: date) -> str:
    """'Today', 'Tomorrow', or the abbreviated weekday name."""
    delta = (day - today).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    return _WEEKDAYS[day.weekday()]


def format_temperature(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{_round_half_up(value)}°C"


def format_percent(value: int | None) -> str:
    if value is None:
        return MISSING
    return f"{value}%"


def format_precipitation(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{value:.1f} mm"


def format_wind(value: float | None) -> str:
    if value is None:
        return MISSING
    return f"{_round_half_up(value)} km/h"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
