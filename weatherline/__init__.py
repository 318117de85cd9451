"""Console client for WeatherAPI.com forecasts with air quality.

Fetches one location's forecast, validates it into typed Pydantic
models and prints a fixed summary of current conditions, air quality
and the multi-day forecast.
"""

__version__ = "0.1.0"
