# ABOUTME: WMO weather code lookup table and day/night helpers.
# ABOUTME: Pure functions; the current time is always passed in by the caller.

from datetime import datetime
from types import MappingProxyType

from clima.models import ConditionPresentation

DAY_START_HOUR = 6
NIGHT_START_HOUR = 18

UNKNOWN_CONDITION = ConditionPresentation(label="Unknown condition", icon_key="unknown")

# code -> (label, day icon, night icon)
_WMO_CODES = MappingProxyType(
    {
        0: ("Clear sky", "clear-day", "clear-night"),
        1: ("Mainly clear", "mostly-clear-day", "mostly-clear-night"),
        2: ("Partly cloudy", "partly-cloudy-day", "partly-cloudy-night"),
        3: ("Overcast", "overcast", "overcast"),
        45: ("Fog", "fog", "fog"),
        48: ("Depositing rime fog", "fog-rime", "fog-rime"),
        51: ("Light drizzle", "drizzle-light", "drizzle-light"),
        53: ("Moderate drizzle", "drizzle", "drizzle"),
        55: ("Dense drizzle", "drizzle-heavy", "drizzle-heavy"),
        56: ("Light freezing drizzle", "freezing-drizzle", "freezing-drizzle"),
        57: ("Dense freezing drizzle", "freezing-drizzle-heavy", "freezing-drizzle-heavy"),
        61: ("Slight rain", "rain-light", "rain-light"),
        63: ("Moderate rain", "rain", "rain"),
        65: ("Heavy rain", "rain-heavy", "rain-heavy"),
        66: ("Light freezing rain", "freezing-rain", "freezing-rain"),
        67: ("Heavy freezing rain", "freezing-rain-heavy", "freezing-rain-heavy"),
        71: ("Slight snowfall", "snow-light", "snow-light"),
        73: ("Moderate snowfall", "snow", "snow"),
        75: ("Heavy snowfall", "snow-heavy", "snow-heavy"),
        77: ("Snow grains", "snow-grains", "snow-grains"),
        80: ("Slight rain showers", "showers-day", "showers-night"),
        81: ("Moderate rain showers", "showers-day", "showers-night"),
        82: ("Violent rain showers", "showers-heavy-day", "showers-heavy-night"),
        85: ("Slight snow showers", "snow-showers-day", "snow-showers-night"),
        86: ("Heavy snow showers", "snow-showers-heavy-day", "snow-showers-heavy-night"),
        95: ("Thunderstorm", "thunderstorm", "thunderstorm"),
        96: ("Thunderstorm with slight hail", "thunderstorm-hail", "thunderstorm-hail"),
        99: ("Thunderstorm with heavy hail", "thunderstorm-hail-heavy", "thunderstorm-hail-heavy"),
    }
)


def present(weather_code: int | None, is_daytime: bool) -> ConditionPresentation:
    """Map a WMO weather code to a label and icon key. Unknown or absent codes get the fallback."""
    entry = _WMO_CODES.get(weather_code) if weather_code is not None else None
    if entry is None:
        return UNKNOWN_CONDITION
    label, day_icon, night_icon = entry
    return ConditionPresentation(label=label, icon_key=day_icon if is_daytime else night_icon)


def is_daytime(moment: datetime) -> bool:
    """Daytime is [06:00, 18:00) in the moment's own (report-local) clock."""
    return DAY_START_HOUR <= moment.hour < NIGHT_START_HOUR


def theme_for(moment: datetime) -> str:
    """Page theme name for a local moment: 'day' or 'night'."""
    return "day" if is_daytime(moment) else "night"
