"""Configuration management for the weatherline console client.

Uses Pydantic Settings so every option can come from the environment
or a local ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_MIN_LENGTH = 20
MAX_FORECAST_DAYS = 14


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Example:
        settings = get_settings()
        print(settings.forecast_days)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars not defined here
        populate_by_name=True,  # Allow both field name and alias
    )

    # WeatherAPI.com configuration
    weather_api_key: str = Field(
        ..., description="WeatherAPI.com API key (required)", alias="WEATHER_API_KEY"
    )

    weather_api_base_url: str = Field(
        "https://api.weatherapi.com/v1",
        description="WeatherAPI.com base URL",
        alias="WEATHER_API_BASE_URL",
    )

    weather_api_timeout_seconds: float = Field(
        10.0,
        description="API request timeout in seconds",
        ge=1,
        le=120,
        alias="WEATHER_API_TIMEOUT_SECONDS",
    )

    weather_api_max_retries: int = Field(
        3,
        description="Retries for connection errors, 429 and 5xx responses",
        ge=0,
        le=10,
        alias="WEATHER_API_MAX_RETRIES",
    )

    forecast_days: int = Field(
        3,  # Free plan limit
        description="Number of forecast days to request",
        ge=1,
        le=MAX_FORECAST_DAYS,
        alias="FORECAST_DAYS",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Logging level", alias="LOG_LEVEL"
    )

    log_format: Literal["json", "text"] = Field(
        "text", description="Log output format", alias="LOG_FORMAT"
    )

    @field_validator("weather_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key is present and plausibly long."""
        v = (v or "").strip()
        if not v:
            raise ValueError("WEATHER_API_KEY cannot be empty")
        if len(v) < API_KEY_MIN_LENGTH:
            raise ValueError(
                f"WEATHER_API_KEY must be at least {API_KEY_MIN_LENGTH} characters"
            )
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names such as LOG_LEVEL=debug."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


def reload_settings() -> Settings:
    """Force reload settings from environment.

    Useful for testing or when environment variables change.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
