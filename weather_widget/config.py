from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    The provider credential is deliberately optional: a missing or wrong key
    is reported by the provider (HTTP 401) and shown as a fetch failure,
    it is never rejected locally.
    """

    # Server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server bind host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Server port")

    # Weather provider
    weather_api_key: str = Field(default="", description="OpenWeatherMap API key")
    weather_api_url: str = Field(default=OPENWEATHER_URL, description="Current weather endpoint")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path | None = Field(default=Path("logs"), description="Directory for JSON log files; None logs to console only")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("weather_api_url", mode="after")
    @classmethod
    def validate_weather_api_url(cls, v: str) -> str:
        """Ensure the provider endpoint is an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("weather_api_url must be a valid http:// or https:// URL")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    The .env file is read once per process. Use this with FastAPI's
    Depends() or call it directly at startup.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
