# ABOUTME: Tests for the display view built from a normalized weather report.
# ABOUTME: Uses a fixed 'now' so theme, day labels and icons are deterministic.

from datetime import date, datetime

from clima.display import build_view, day_label, format_precipitation, format_temperature
from clima.models import CurrentConditions, ForecastDay, WeatherReport


def _report() -> WeatherReport:
    return WeatherReport(
        place="São Paulo, Brasil",
        current=CurrentConditions(temperature_c=24.5, humidity_pct=65, precipitation_mm=1.2, wind_kph=15.0, weather_code=0),
        forecast=[
            ForecastDay(date=date(2025, 1, 15), max_c=30, min_c=20, precipitation_mm=0.0, wind_max_kph=18.0, humidity_avg_pct=63, weather_code=2),
            ForecastDay(date=date(2025, 1, 16), max_c=29, min_c=19, precipitation_mm=4.5, wind_max_kph=22.3, humidity_avg_pct=74, weather_code=61),
            ForecastDay(date=date(2025, 1, 17), max_c=None, min_c=18),
        ],
    )


class TestBuildView:
    def test_daytime_view(self):
        """A midday 'now' yields the day theme and daytime icons.

        Implementation: Builds the view at 14:00 local time.
        Passing implies: The presenter is fed the daytime flag derived from 'now'.
        """
        view = build_view(_report(), datetime(2025, 1, 15, 14, 0))

        assert view.theme == "day"
        assert view.place == "São Paulo, Brasil"
        assert view.current.temperature == "25°C"
        assert view.current.humidity == "65%"
        assert view.current.precipitation == "1.2 mm"
        assert view.current.wind == "15 km/h"
        assert view.current.condition.icon_key == "clear-day"

    def test_night_view(self):
        """An evening 'now' yields the night theme and a night icon for current conditions.

        Implementation: Builds the view at 21:00 local time.
        Passing implies: Theme and current icon switch together while day cards keep daytime icons.
        """
        view = build_view(_report(), datetime(2025, 1, 15, 21, 0))
        assert view.theme == "night"
        assert view.current.condition.icon_key == "clear-night"
        assert view.forecast[0].condition.icon_key == "partly-cloudy-day"

    def test_one_card_per_day_in_order(self):
        """Each forecast day becomes one card, in report order.

        Implementation: Builds the view and inspects the cards.
        Passing implies: Cards keep order, labels and missing-value placeholders.
        """
        view = build_view(_report(), datetime(2025, 1, 15, 9, 0))

        assert [c.day_label for c in view.forecast] == ["Today", "Tomorrow", "Fri"]
        assert view.forecast[0].max_temperature == "30°C"
        assert view.forecast[0].humidity == "63%"
        assert view.forecast[1].condition.label == "Slight rain"
        assert view.forecast[2].max_temperature == "--"
        assert view.forecast[2].condition.label == "Unknown condition"


class TestFormatting:
    def test_day_label_uses_weekday_after_tomorrow(self):
        assert day_label(date(2025, 1, 20), date(2025, 1, 15)) == "Mon"

    def test_temperature_rounds_half_up(self):
        assert format_temperature(-0.4) == "0°C"
        assert format_temperature(22.5) == "23°C"
        assert format_temperature(None) == "--"

    def test_precipitation_one_decimal(self):
        assert format_precipitation(0) == "0.0 mm"
