"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Library functions never read settings implicitly; every default is an
explicit keyword argument. The CLI reads these settings and passes them
through.

## Optional Environment Variables

- VENUE_COMFORT_DEFAULT_HUMIDITY_PERCENT: Humidity assumed when a sample has none (default: 50)
- VENUE_COMFORT_BOOKING_WINDOW_HOURS: Booking window length (default: 3)
- VENUE_COMFORT_DEFAULT_EXPOSURE: Exposure for venues matching no rule (default: beer_garden)
- VENUE_COMFORT_LOG_LEVEL: Logging level (default: INFO)
- VENUE_COMFORT_DEBUG: Enable debug mode (default: false)

## Example .env file

```
VENUE_COMFORT_DEFAULT_HUMIDITY_PERCENT=55
VENUE_COMFORT_BOOKING_WINDOW_HOURS=4
VENUE_COMFORT_LOG_LEVEL=DEBUG
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from venue_comfort.models.comfort import ExposureCategory


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VENUE_COMFORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Engine defaults
    default_humidity_percent: float = Field(
        default=50.0,
        ge=0,
        le=100,
        description="Humidity assumed when a weather sample has none",
    )
    booking_window_hours: int = Field(
        default=3, ge=1, le=24, description="Booking window length in hours"
    )
    default_exposure: ExposureCategory = Field(
        default=ExposureCategory.BEER_GARDEN,
        description="Exposure category for venues matching no keyword rule",
    )

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
