# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides canned Open-Meteo payloads and a resolved São Paulo location.

import pytest

from clima.models import GeoResult


@pytest.fixture
def sao_paulo() -> GeoResult:
    return GeoResult(latitude=-23.55, longitude=-46.63, display_name="São Paulo", country="Brasil")


@pytest.fixture
def geocoding_payload() -> dict:
    return {
        "results": [
            {
                "latitude": -23.55,
                "longitude": -46.63,
                "name": "São Paulo",
                "country": "Brasil",
                "timezone": "America/Sao_Paulo",
            }
        ]
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "latitude": -23.5,
        "longitude": -46.625,
        "timezone": "America/Sao_Paulo",
        "current": {
            "time": "2025-01-15T14:00",
            "temperature_2m": 25,
            "relative_humidity_2m": 65,
            "precipitation": 1.2,
            "wind_speed_10m": 15,
            "weathercode": 2,
        },
        "daily": {
            "time": ["2025-01-15", "2025-01-16", "2025-01-17", "2025-01-18", "2025-01-19"],
            "weathercode": [2, 61, 80, 95, 0],
            "temperature_2m_max": [30, 29, 28, 27, 26],
            "temperature_2m_min": [20, 19, 18, 17, 16],
            "precipitation_sum": [0.0, 4.5, 12.1, 20.0, 0.0],
            "wind_speed_10m_max": [18.0, 22.3, 15.0, 30.4, 9.9],
            "relative_humidity_2m_max": [70, 88, 92, 95, 60],
            "relative_humidity_2m_min": [55, 60, 71, 80, 41],
        },
    }
