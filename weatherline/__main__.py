"""Main entry point for the weatherline console client.

Run with:
    python -m weatherline "New York"
    weatherline                      # prompts for a location

Environment variables:
    WEATHER_API_KEY     Required unless --api-key is given
    FORECAST_DAYS       Forecast days to request (default: 3)
    LOG_LEVEL           Logging level (default: WARNING)
    LOG_FORMAT          json or text (default: text)

Exit codes:
    0   Report printed
    1   The API call failed or the response could not be parsed
    2   Usage or configuration problem (no location, bad API key)
"""

import argparse
import sys
from typing import Callable, Optional

from pydantic import ValidationError

from weatherline.client import WeatherAPIClient, WeatherAPIError
from weatherline.config import MAX_FORECAST_DAYS, Settings, get_settings
from weatherline.models import PayloadError
from weatherline.observability import configure_logging, get_logger
from weatherline.report import render_report

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

LOCATION_HINT = (
    "Enter city name, IP address, Latitude/Longitude (decimal degree),\n"
    "US Zipcode, UK Postcode, Canada Postalcode."
)


def _forecast_days(value: str) -> int:
    number = int(value)
    if not 1 <= number <= MAX_FORECAST_DAYS:
        raise argparse.ArgumentTypeError(
            f"must be between 1 and {MAX_FORECAST_DAYS} (got {value})"
        )
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="weatherline",
        description="Current conditions, air quality and forecast from WeatherAPI.com",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  weatherline London
  weatherline "New York"          # quote locations containing spaces
  weatherline 48.8567,2.3508 -d 1
  weatherline                     # prompt for a location
        """,
    )

    parser.add_argument(
        "location",
        nargs="?",
        help="City name, IP address, lat,lon, or postal code",
    )
    parser.add_argument(
        "-d",
        "--days",
        type=_forecast_days,
        default=None,
        help="Forecast days to request (default: FORECAST_DAYS or 3)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="WeatherAPI.com key (default: WEATHER_API_KEY)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override LOG_LEVEL",
    )

    return parser


def prompt_for_location(input_fn: Callable[[str], str] = input) -> Optional[str]:
    """Ask for a location interactively.

    Returns:
        The stripped location, or None when nothing was entered
    """
    try:
        query = input_fn("Enter Location: ")
    except EOFError:
        return None
    query = query.strip()
    return query or None


def load_settings(api_key: Optional[str] = None) -> Settings:
    """Load settings, letting a command line key override the environment."""
    if api_key:
        return Settings(weather_api_key=api_key)
    return get_settings()


def run(query: str, days: int, settings: Settings) -> list[str]:
    """Fetch, validate and render the forecast for one location.

    Args:
        query: Location query
        days: Forecast days to request
        settings: Loaded settings

    Returns:
        Report lines ready to print

    Raises:
        WeatherAPIError: If the request fails
        PayloadError: If the response does not match the schema
    """
    with WeatherAPIClient(
        api_key=settings.weather_api_key,
        base_url=settings.weather_api_base_url,
        timeout=settings.weather_api_timeout_seconds,
        max_retries=settings.weather_api_max_retries,
    ) as client:
        weather = client.fetch_weather(query, days=days)

    return render_report(weather)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.api_key)
    except ValidationError as e:
        configure_logging(log_level=args.log_level or "WARNING")
        logger.error("settings_invalid", error_count=e.error_count())
        for error in e.errors():
            print(f"Configuration error: {error['msg']}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(
        log_level=args.log_level or settings.log_level,
        json_format=settings.json_logs,
    )

    query = args.location.strip() if args.location else None
    if not query:
        query = prompt_for_location()
    if not query:
        print("No Location is provided", file=sys.stderr)
        print(LOCATION_HINT, file=sys.stderr)
        return EXIT_USAGE

    days = args.days or settings.forecast_days
    logger.info("report_requested", query=query, days=days)

    try:
        lines = run(query, days, settings)
    except PayloadError as e:
        logger.error("payload_invalid", error=str(e), error_count=e.error_count)
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE
    except WeatherAPIError as e:
        logger.error("weather_fetch_failed", error=str(e), status_code=e.status_code)
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE

    for line in lines:
        print(line)

    logger.info("report_printed", query=query, lines=len(lines))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
