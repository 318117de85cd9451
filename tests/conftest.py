"""Shared fixtures: a complete forecast payload shaped like WeatherAPI.com's.

Tests never touch the network; every response body is built here.
"""

import copy
import os

import pytest

# Set required environment variables for tests
os.environ.setdefault("WEATHER_API_KEY", "test_api_key_for_tests_0123456789")

ICON = "//cdn.weatherapi.com/weather/64x64/day/116.png"


def make_air_quality(us_epa_index=2, pm2_5=12.34, pm10=45.678, gb_defra_index=2):
    return {
        "co": 230.35,
        "no2": 13.69,
        "o3": 68.0,
        "so2": 2.405,
        "pm2_5": pm2_5,
        "pm10": pm10,
        "us-epa-index": us_epa_index,
        "gb-defra-index": gb_defra_index,
    }


def make_condition(text="Partly cloudy", code=1003):
    return {"text": text, "icon": ICON, "code": code}


def make_current(wind_dir="NE", **air_quality):
    return {
        "last_updated_epoch": 1754053200,
        "last_updated": "2025-08-01 14:00",
        "temp_c": 21.3,
        "temp_f": 70.3,
        "is_day": 1,
        "condition": make_condition(),
        "wind_mph": 9.4,
        "wind_kph": 15.1,
        "wind_degree": 48,
        "wind_dir": wind_dir,
        "pressure_mb": 1015.0,
        "pressure_in": 29.97,
        "precip_mm": 0.0,
        "precip_in": 0.0,
        "humidity": 53,
        "cloud": 50,
        "feelslike_c": 21.3,
        "feelslike_f": 70.3,
        "windchill_c": 20.1,
        "windchill_f": 68.2,
        "heatindex_c": 20.1,
        "heatindex_f": 68.2,
        "dewpoint_c": 11.2,
        "dewpoint_f": 52.2,
        "vis_km": 10.0,
        "vis_miles": 6.0,
        "uv": 5.0,
        "gust_mph": 10.8,
        "gust_kph": 17.4,
        "air_quality": make_air_quality(**air_quality),
        "short_rad": 512.3,
        "diff_rad": 120.4,
        "dni": 701.2,
        "gti": 0,
    }


def make_hour(time_epoch, time):
    return {
        "time_epoch": time_epoch,
        "time": time,
        "temp_c": 17.4,
        "temp_f": 63.3,
        "is_day": 0,
        "condition": make_condition("Clear ", 1000),
        "wind_mph": 6.9,
        "wind_kph": 11.2,
        "wind_degree": 230,
        "wind_dir": "SW",
        "pressure_mb": 1016.0,
        "pressure_in": 30.0,
        "precip_mm": 0.0,
        "precip_in": 0.0,
        "snow_cm": 0.0,
        "humidity": 72,
        "cloud": 12,
        "feelslike_c": 17.4,
        "feelslike_f": 63.3,
        "windchill_c": 17.4,
        "windchill_f": 63.3,
        "heatindex_c": 17.4,
        "heatindex_f": 63.3,
        "dewpoint_c": 12.3,
        "dewpoint_f": 54.1,
        "will_it_rain": 0,
        "chance_of_rain": 0,
        "will_it_snow": 0,
        "chance_of_snow": 0,
        "vis_km": 10.0,
        "vis_miles": 6.0,
        "gust_kph": 16.1,
        "gust_mph": 10.0,
        "uv": 0.0,
        "air_quality": make_air_quality(us_epa_index=1, pm2_5=5.5, pm10=8.1),
        "short_rad": 0.0,
        "diff_rad": 0.0,
        "dni": 0.0,
        "gti": 0.0,
    }


def make_forecast_day(date, date_epoch, maxtemp_c, maxtemp_f, text, hours=24):
    return {
        "date": date,
        "date_epoch": date_epoch,
        "day": {
            "maxtemp_c": maxtemp_c,
            "maxtemp_f": maxtemp_f,
            "mintemp_c": 14.2,
            "mintemp_f": 57.6,
            "avgtemp_c": 18.1,
            "avgtemp_f": 64.6,
            "maxwind_mph": 11.6,
            "maxwind_kph": 18.7,
            "totalprecip_mm": 0.41,
            "totalprecip_in": 0.02,
            "totalsnow_cm": 0.0,
            "avgvis_km": 9.8,
            "avgvis_miles": 6.0,
            "avghumidity": 68,
            "daily_will_it_rain": 1,
            "daily_chance_of_rain": 84,
            "daily_will_it_snow": 0,
            "daily_chance_of_snow": 0,
            "condition": make_condition(text, 1063),
            "uv": 5.0,
            "air_quality": make_air_quality(),
        },
        "astro": {
            "sunrise": "05:25 AM",
            "sunset": "08:46 PM",
            "moonrise": "01:04 PM",
            "moonset": "11:08 PM",
            "moon_phase": "Waxing Crescent",
            "moon_illumination": 47,
            "is_moon_up": 0,
            "is_sun_up": 0,
        },
        "hour": [
            make_hour(date_epoch + h * 3600, f"{date} {h:02d}:00")
            for h in range(hours)
        ],
    }


def make_payload(wind_dir="NE", days=None, **air_quality):
    """Build a complete forecast response.

    Keyword arguments other than ``wind_dir`` and ``days`` override the
    current air quality values.
    """
    if days is None:
        days = [
            make_forecast_day("2025-08-01", 1754006400, 23.4, 74.1, "Patchy rain nearby"),
            make_forecast_day("2025-08-02", 1754092800, 25.0, 77.0, "Sunny"),
            make_forecast_day("2025-08-03", 1754179200, 19.8, 67.6, "Moderate rain"),
        ]
    return {
        "location": {
            "name": "London",
            "region": "City of London, Greater London",
            "country": "United Kingdom",
            "lat": 51.5171,
            "lon": -0.1062,
            "tz_id": "Europe/London",
            "localtime_epoch": 1754053500,
            "localtime": "2025-08-01 14:05",
        },
        "current": make_current(wind_dir=wind_dir, **air_quality),
        "forecast": {"forecastday": days},
    }


@pytest.fixture
def weather_payload():
    """A fresh, complete forecast payload (safe to mutate)."""
    return copy.deepcopy(make_payload())


@pytest.fixture
def payload_factory():
    """Factory for payload variants, e.g. ``payload_factory(wind_dir="XXX")``."""
    return make_payload


@pytest.fixture
def forecast_day_factory():
    return make_forecast_day
