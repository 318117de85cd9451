"""WeatherAPI.com client for the forecast-with-air-quality endpoint.

Provides:
- Automatic retry with exponential backoff for transient failures
- Mapping of HTTP and provider errors onto a small exception hierarchy
- Validation of the response body into ``WeatherData``
"""

import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weatherline.config import get_settings
from weatherline.models import WeatherData, parse_weather_data
from weatherline.observability import get_logger, log_api_request

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_TIMEOUT = 10.0  # seconds
FORECAST_ENDPOINT = "forecast.json"


class WeatherAPIError(Exception):
    """Base exception for WeatherAPI.com errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.response_body = response_body


class WeatherAPIAuthError(WeatherAPIError):
    """Raised when the API key is invalid, disabled or over quota."""

    pass


class WeatherAPIRateLimitError(WeatherAPIError):
    """Raised when API rate limit is exceeded."""

    pass


def _provider_error(response: requests.Response) -> tuple[Optional[int], str]:
    """Extract ``(code, message)`` from the provider's error body.

    WeatherAPI.com reports failures as ``{"error": {"code": ..., "message": ...}}``.
    Falls back to the raw body when it is not in that shape.
    """
    try:
        error = response.json()["error"]
        return error.get("code"), error.get("message") or ""
    except (ValueError, KeyError, TypeError, AttributeError):
        return None, (response.text or "")[:300]


class WeatherAPIClient:
    """HTTP client for the WeatherAPI.com forecast endpoint.

    Example:
        with WeatherAPIClient() as client:
            weather = client.fetch_weather("London", days=3)
            print(weather.current.temp_c)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
    ):
        """Initialize the API client.

        Args:
            api_key: WeatherAPI.com key (defaults to settings)
            base_url: API base URL
            timeout: Request timeout in seconds
            max_retries: Maximum number of retries for failed requests
        """
        self.api_key = api_key or get_settings().weather_api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=0.5,  # 0.5s, 1s, 2s between retries
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
            raise_on_status=False,  # Hand the final response to our own checks
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

        logger.debug(
            "weather_client_initialized",
            base_url=self.base_url,
            timeout=timeout,
            max_retries=max_retries,
        )

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url}/{FORECAST_ENDPOINT}"

    def fetch_forecast_json(self, query: str, days: int = 3) -> str:
        """Fetch the raw forecast document for a location.

        Args:
            query: Location query (city, IP, "lat,lon", postcode); passed
                through untouched
            days: Number of forecast days; the API enforces the plan's limit

        Returns:
            Response body text

        Raises:
            WeatherAPIAuthError: If the key is rejected (401/403)
            WeatherAPIRateLimitError: If rate limit exceeded (429)
            WeatherAPIError: For any other non-200 status or network failure
        """
        params = {
            "key": self.api_key,
            "q": query,
            "days": days,
            "aqi": "yes",
        }

        started = time.perf_counter()

        def elapsed_ms() -> float:
            return (time.perf_counter() - started) * 1000

        try:
            response = self.session.get(
                self.forecast_url,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            log_api_request(query, days, "timeout", elapsed_ms())
            raise WeatherAPIError(f"Request timed out after {self.timeout}s")
        except requests.exceptions.ConnectionError as e:
            log_api_request(query, days, "error", elapsed_ms(), error=str(e))
            raise WeatherAPIError(f"Connection error: {e}")
        except requests.exceptions.RequestException as e:
            log_api_request(query, days, "error", elapsed_ms(), error=str(e))
            raise WeatherAPIError(f"Request failed: {e}")

        status_code = response.status_code
        if status_code != 200:
            error_code, message = _provider_error(response)
            log_api_request(
                query,
                days,
                "error",
                elapsed_ms(),
                status_code=status_code,
                error_code=error_code,
            )

            if status_code in (401, 403):
                exc_class = WeatherAPIAuthError
            elif status_code == 429:
                exc_class = WeatherAPIRateLimitError
            else:
                exc_class = WeatherAPIError

            raise exc_class(
                f"Failed to fetch weather data, status code {status_code}"
                + (f": {message}" if message else ""),
                status_code=status_code,
                error_code=error_code,
                response_body=response.text,
            )

        log_api_request(query, days, "success", elapsed_ms(), status_code=status_code)
        return response.text

    def fetch_weather(self, query: str, days: int = 3) -> WeatherData:
        """Fetch and validate the forecast for a location.

        Raises:
            WeatherAPIError: On transport or HTTP failures
            PayloadError: If the body does not match the forecast schema
        """
        body = self.fetch_forecast_json(query, days=days)
        weather = parse_weather_data(body)

        logger.info(
            "weather_parsed",
            location=weather.location.name,
            forecast_days=len(weather.forecast.forecastday),
        )
        return weather

    def close(self):
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
