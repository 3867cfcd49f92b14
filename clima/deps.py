# ABOUTME: Dependency container for the web app using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and the settings lookups run with.

import httpx
from pydantic import BaseModel, ConfigDict

from clima.config import Settings


class LookupDeps(BaseModel):
    """Dependencies shared by every request handled by the web app."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with the configured timeout.

    No retry transport: a failed request is terminal for the lookup.
    """
    return httpx.AsyncClient(timeout=settings.http_timeout)
