"""Pydantic models for the WeatherAPI.com forecast response.

The models mirror the JSON returned by ``/v1/forecast.json?aqi=yes``
field for field. Decoding is strict and fail-fast:

- every field is required, there are no defaults
- values are not coerced across types (``"12"`` is not a float and
  ``12.5`` is not an int); integers are accepted where floats are expected
- the two hyphenated air quality keys are mapped through
  ``AIR_QUALITY_ALIASES``

Anything that does not validate surfaces as a single ``PayloadError``.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Payload keys that are not valid Python identifiers
AIR_QUALITY_ALIASES = {
    "us_epa_index": "us-epa-index",
    "gb_defra_index": "gb-defra-index",
}


class PayloadError(ValueError):
    """Raised when a response body does not match the forecast schema.

    There is no partial result: the whole document is rejected.
    """

    def __init__(self, message: str, error_count: int = 1):
        super().__init__(message)
        self.error_count = error_count


class ApiModel(BaseModel):
    """Base for all response entities: immutable, strict, name-for-name.

    Keys the schema does not declare are ignored, as the provider adds
    fields over time; missing and mistyped fields still fail.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )


class AirQuality(ApiModel):
    """Pollutant concentrations and the two national indices.

    Concentrations are in μg/m³. The indices are advisory: an out-of-range
    value still validates and is handled at render time.
    """

    co: float = Field(..., description="Carbon monoxide")
    no2: float = Field(..., description="Nitrogen dioxide")
    o3: float = Field(..., description="Ozone")
    so2: float = Field(..., description="Sulphur dioxide")
    pm2_5: float = Field(..., description="PM2.5")
    pm10: float = Field(..., description="PM10")
    us_epa_index: int = Field(
        ...,
        alias=AIR_QUALITY_ALIASES["us_epa_index"],
        description="US EPA index, 1 (Good) to 6 (Hazardous)",
    )
    gb_defra_index: int = Field(
        ...,
        alias=AIR_QUALITY_ALIASES["gb_defra_index"],
        description="UK DEFRA index, 1 to 10",
    )


class Condition(ApiModel):
    """Weather condition text, icon and code."""

    text: str
    icon: str = Field(..., description="Protocol-relative icon URL")
    code: int


class Location(ApiModel):
    """Resolved location for the query."""

    name: str
    region: str
    country: str
    lat: float
    lon: float
    tz_id: str = Field(..., description="IANA time zone, e.g. Europe/London")
    localtime_epoch: int
    localtime: str = Field(..., description="Local time as 'YYYY-MM-DD HH:MM'")


class Current(ApiModel):
    """Current observation for the location.

    ``is_day`` is the provider's 0/1 flag, kept as an int.
    """

    last_updated_epoch: int
    last_updated: str

    # Temperature
    temp_c: float
    temp_f: float
    is_day: int
    condition: Condition

    # Wind
    wind_mph: float
    wind_kph: float
    wind_degree: int
    wind_dir: str = Field(..., description="16-point compass abbreviation")

    # Pressure and precipitation
    pressure_mb: float
    pressure_in: float
    precip_mm: float
    precip_in: float
    humidity: int
    cloud: int

    # Apparent temperatures
    feelslike_c: float
    feelslike_f: float
    windchill_c: float
    windchill_f: float
    heatindex_c: float
    heatindex_f: float
    dewpoint_c: float
    dewpoint_f: float

    vis_km: float
    vis_miles: float
    uv: float
    gust_mph: float
    gust_kph: float
    air_quality: AirQuality

    # Solar radiation, W/m²
    short_rad: float
    diff_rad: float
    dni: float
    gti: float


class Day(ApiModel):
    """Aggregated summary for one forecast day."""

    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    avgtemp_c: float
    avgtemp_f: float
    maxwind_mph: float
    maxwind_kph: float
    totalprecip_mm: float
    totalprecip_in: float
    totalsnow_cm: float
    avgvis_km: float
    avgvis_miles: float
    avghumidity: int

    # 0/1 flags and 0-100 percentages
    daily_will_it_rain: int
    daily_chance_of_rain: int
    daily_will_it_snow: int
    daily_chance_of_snow: int

    condition: Condition
    uv: float
    air_quality: AirQuality


class Astro(ApiModel):
    """Sun and moon events for one forecast day."""

    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination: int
    is_moon_up: int
    is_sun_up: int


class Hour(ApiModel):
    """Forecast for a single hour."""

    time_epoch: int
    time: str
    temp_c: float
    temp_f: float
    is_day: int
    condition: Condition
    wind_mph: float
    wind_kph: float
    wind_degree: int
    wind_dir: str
    pressure_mb: float
    pressure_in: float
    precip_mm: float
    precip_in: float
    snow_cm: float
    humidity: int
    cloud: int
    feelslike_c: float
    feelslike_f: float
    windchill_c: float
    windchill_f: float
    heatindex_c: float
    heatindex_f: float
    dewpoint_c: float
    dewpoint_f: float
    will_it_rain: int
    chance_of_rain: int
    will_it_snow: int
    chance_of_snow: int
    vis_km: float
    vis_miles: float
    gust_kph: float
    gust_mph: float
    uv: float
    air_quality: AirQuality
    short_rad: float
    diff_rad: float
    dni: float
    gti: float


class ForecastDay(ApiModel):
    """One calendar day of the forecast.

    ``hour`` holds the provider's hourly entries in payload order
    (normally 24); the count is not checked here.
    """

    date: str = Field(..., description="Forecast date (YYYY-MM-DD)")
    date_epoch: int
    day: Day
    astro: Astro
    hour: list[Hour]


class Forecast(ApiModel):
    """Forecast days in chronological (payload) order."""

    forecastday: list[ForecastDay]


class WeatherData(ApiModel):
    """Root of the forecast response."""

    location: Location
    current: Current
    forecast: Forecast

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the provider's JSON shape.

        Uses the payload key names, including the hyphenated air quality
        indices, so the result validates again with ``parse_weather_data``.
        """
        return self.model_dump(mode="json", by_alias=True)


def _summarize(exc: ValidationError, limit: int = 3) -> str:
    """Build a short, readable description of the first validation errors."""
    parts = []
    for error in exc.errors()[:limit]:
        loc = ".".join(str(p) for p in error["loc"]) or "<root>"
        parts.append(f"{loc}: {error['msg']}")
    more = exc.error_count() - limit
    if more > 0:
        parts.append(f"... and {more} more")
    return "; ".join(parts)


def parse_weather_data(payload: Union[str, bytes, dict]) -> WeatherData:
    """Decode a forecast response into a ``WeatherData`` tree.

    Args:
        payload: Raw JSON text/bytes, or an already-decoded JSON object

    Returns:
        Fully populated WeatherData

    Raises:
        PayloadError: If the document is not valid JSON, or any field is
            missing or has the wrong type
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return WeatherData.model_validate_json(payload)
        if isinstance(payload, dict):
            return WeatherData.model_validate(payload)
    except ValidationError as e:
        raise PayloadError(
            f"Failed to parse weather payload: {_summarize(e)}",
            error_count=e.error_count(),
        ) from e

    raise PayloadError(
        f"Unsupported payload type: {type(payload).__name__}"
    )
