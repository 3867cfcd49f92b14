# ABOUTME: Pydantic BaseModels for geocoding results and the normalized weather report.
# ABOUTME: Request-scoped, immutable value objects consumed by the presenter and display layers.

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class GeoResult(BaseModel):
    """Top geocoding match for a place name."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float
    longitude: float
    display_name: str
    country: str | None = None
    timezone: str | None = None

    @property
    def place(self) -> str:
        """Display name joined with the country, e.g. 'São Paulo, Brasil'."""
        if self.country:
            return f"{self.display_name}, {self.country}"
        return self.display_name


class CurrentConditions(BaseModel):
    """Current conditions at the resolved location, in upstream units."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    temperature_c: float
    humidity_pct: int
    precipitation_mm: float = 0.0
    wind_kph: float
    weather_code: int | None = None
    observed_at: datetime | None = None


class ForecastDay(BaseModel):
    """One forecast day, built from index i of every daily column."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: date
    max_c: float | None = None
    min_c: float | None = None
    precipitation_mm: float | None = None
    wind_max_kph: float | None = None
    humidity_avg_pct: int | None = None
    weather_code: int | None = None


class WeatherReport(BaseModel):
    """Normalized current conditions plus the chronological daily forecast."""

    model_config = ConfigDict(frozen=True)

    place: str
    current: CurrentConditions
    forecast: list[ForecastDay] = []
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None


class ConditionPresentation(BaseModel):
    """Human-readable label and icon key for a weather code."""

    model_config = ConfigDict(frozen=True)

    label: str
    icon_key: str
