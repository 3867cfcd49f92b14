# ABOUTME: Runtime settings read from the environment (and an optional .env file).
# ABOUTME: Only the web entry point reads these; service functions take explicit arguments.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel

from clima.weather_service import FORECAST_URL, GEOCODING_URL


class Settings(BaseModel):
    """Endpoints, transport timeout, and log level for a running app."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    http_timeout: float = 10.0
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load .env into the process environment and build Settings from CLIMA_* variables."""
    load_dotenv()
    return Settings(
        geocoding_url=os.environ.get("CLIMA_GEOCODING_URL", GEOCODING_URL),
        forecast_url=os.environ.get("CLIMA_FORECAST_URL", FORECAST_URL),
        http_timeout=os.environ.get("CLIMA_HTTP_TIMEOUT", "10"),
        log_level=os.environ.get("CLIMA_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
