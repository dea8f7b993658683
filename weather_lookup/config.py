import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # weather-lookup/

WEATHERAPI_CURRENT_URL = "https://api.weatherapi.com/v1/current.json"


class Settings(BaseSettings):
    """Application settings with validation.

    The weatherapi.com key is required and will raise a validation error if missing.
    Secrets must be provided via environment variables or .env file.

    The temperature unit is deliberately absent: it is runtime state owned by
    WeatherStateManager, not configuration.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Weather provider - required
    weather_api_key: str = Field(min_length=1, description="weatherapi.com API key")
    weather_api_url: str = Field(
        default=WEATHERAPI_CURRENT_URL,
        pattern=r"^https?://",
        description="weatherapi.com current conditions endpoint",
    )
    weather_api_timeout: float = Field(
        default=10.0,
        gt=0,
        le=60,
        description="Read timeout in seconds for provider calls",
    )

    # Browser origins allowed to call the JSON API
    cors_origin_regex: str = Field(
        default=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
        description="Regex of allowed CORS origins",
    )

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
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

    @field_validator("weather_api_key", mode="after")
    @classmethod
    def validate_weather_api_key(cls, v: str) -> str:
        """Ensure weather_api_key is not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("weather_api_key must not be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    The .env file is read once; use this with FastAPI's Depends().

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.api_host}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
