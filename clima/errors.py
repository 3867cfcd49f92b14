# ABOUTME: Error taxonomy for the weather lookup flow.
# ABOUTME: Each failure kind carries one user-facing message and a stable kind string.


class WeatherLookupError(Exception):
    """Base class for every terminal failure of a weather lookup."""

    kind = "error"
    message = "Could not complete the weather lookup."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class EmptyQueryError(WeatherLookupError):
    kind = "empty_query"
    message = "Please enter a city name."


class LocationNotFoundError(WeatherLookupError):
    kind = "not_found"
    message = "City not found."

    def __init__(self, query: str):
        self.query = query
        super().__init__()


class RateLimitedError(WeatherLookupError):
    kind = "rate_limited"
    message = "Weather API request limit exceeded. Please try again later."


class UpstreamError(WeatherLookupError):
    kind = "upstream_error"
    message = "Could not retrieve weather data."

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__()


class MalformedResponseError(WeatherLookupError):
    kind = "malformed_response"
    message = "Unexpected response format from the weather API."


class NetworkFailureError(WeatherLookupError):
    """Transport-level failure; the message quotes the underlying httpx error."""

    kind = "network_failure"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network failure while contacting the weather API: {cause}")
