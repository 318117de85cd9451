"""Console report for a validated forecast response.

Turns a ``WeatherData`` tree into the fixed list of lines printed by the
CLI. Rendering is pure: wind and AQI codes go through the lookup tables,
which always return a value, so a validated response always renders.
"""

from weatherline.lookups import aqi_label, wind_arrow
from weatherline.models import AirQuality, ForecastDay, WeatherData

SEPARATOR = "<>" + "-" * 70 + "<>"
FORECAST_HEADER = "▶ Forecast:"


def format_air_quality(air_quality: AirQuality) -> str:
    """Format the AQI label with PM2.5 and PM10 at one decimal place.

    Example:
        AQI: Moderate\\tPM2.5: 12.3 μg/m³\\tPM10: 45.7 μg/m³
    """
    return (
        f"AQI: {aqi_label(air_quality.us_epa_index)}"
        f"\tPM2.5: {air_quality.pm2_5:.1f} μg/m³"
        f"\tPM10: {air_quality.pm10:.1f} μg/m³"
    )


def format_forecast_day(forecast_day: ForecastDay) -> str:
    """Format the one-line daily summary shown under the forecast header."""
    day = forecast_day.day
    return (
        f"  - {forecast_day.date}: {day.maxtemp_c}°C / {day.maxtemp_f}°F, "
        f"{day.condition.text} (Precip: {day.totalprecip_mm} mm, UV: {day.uv})"
    )


def render_report(weather: WeatherData) -> list[str]:
    """Render the full report.

    Args:
        weather: Validated forecast response

    Returns:
        Lines in display order, without trailing newlines. Empty strings
        are blank spacer lines.
    """
    location = weather.location
    current = weather.current

    lines = [
        SEPARATOR,
        f"{location.name} ({location.region}, {location.country})",
        f"Local Time: {location.localtime}",
        "",
        f"{current.condition.text} | {current.temp_c}°C / {current.temp_f}°F"
        f"\tUV: {current.uv}",
        "",
        f"Feels like: {current.feelslike_c}°C / {current.feelslike_f}°F"
        f"\tHumidity: {current.humidity}%\tPrecip: {current.precip_mm} mm",
        f"Wind: {wind_arrow(current.wind_dir)} {current.wind_kph}kph / "
        f"{current.wind_mph}mph \tDew Point: {current.dewpoint_c}°C / "
        f"{current.dewpoint_f}°F",
        format_air_quality(current.air_quality),
        "",
        FORECAST_HEADER,
    ]

    # Payload order is chronological
    lines.extend(format_forecast_day(fd) for fd in weather.forecast.forecastday)
    lines.append(SEPARATOR)

    return lines
