"""Weather observation models.

Units follow the provider-neutral canonical set:
- Temperature: Celsius (°C)
- Wind speed: meters per second (m/s)
- Humidity: percentage (0-100)
- UV: index (0+)
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class WeatherCondition(str, Enum):
    """General sky condition categories."""

    CLEAR = "clear"
    CLOUDS = "clouds"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    MIST = "mist"
    UNKNOWN = "unknown"

    @classmethod
    def from_text(cls, text: str | None) -> "WeatherCondition":
        """Parse a provider condition string such as 'Clouds' or 'light rain'.

        Order matters - worst first.
        """
        if not text:
            return cls.UNKNOWN
        desc = text.lower()

        if "thunder" in desc:
            return cls.THUNDERSTORM
        if any(x in desc for x in ["snow", "sleet", "hail"]):
            return cls.SNOW
        if any(x in desc for x in ["rain", "shower"]):
            return cls.RAIN
        if "drizzle" in desc:
            return cls.DRIZZLE
        if any(x in desc for x in ["fog", "haze", "mist", "smoke"]):
            return cls.MIST
        if any(x in desc for x in ["cloud", "overcast"]):
            return cls.CLOUDS
        if any(x in desc for x in ["clear", "sun"]):
            return cls.CLEAR
        return cls.UNKNOWN

    def is_wet(self) -> bool:
        """Check if the condition involves precipitation."""
        return self in (
            WeatherCondition.RAIN,
            WeatherCondition.DRIZZLE,
            WeatherCondition.THUNDERSTORM,
            WeatherCondition.SNOW,
        )


class WeatherSample(BaseModel):
    """A single live observation supplied by the caller."""

    temperature_c: float | None = Field(default=None, description="Temperature in Celsius")
    wind_speed_ms: float | None = Field(
        default=None, description="Wind speed in meters per second"
    )
    humidity_percent: float | None = Field(
        default=None, ge=0, le=100, description="Relative humidity percentage"
    )
    condition: WeatherCondition = Field(
        default=WeatherCondition.UNKNOWN, description="General sky condition"
    )
    uv_index: float | None = Field(default=None, ge=0, description="UV index")

    @field_validator("condition", mode="before")
    @classmethod
    def parse_condition(cls, v):
        """Accept free-text provider conditions."""
        if isinstance(v, WeatherCondition):
            return v
        if v is None:
            return WeatherCondition.UNKNOWN
        if isinstance(v, str):
            try:
                return WeatherCondition(v.lower())
            except ValueError:
                return WeatherCondition.from_text(v)
        return v


class ProviderHour(BaseModel):
    """One hour of raw provider forecast data."""

    time: datetime = Field(..., description="Local start of the hour")
    temperature_c: float | None = Field(default=None, description="Temperature in Celsius")
    wind_speed_ms: float | None = Field(
        default=None, description="Wind speed in meters per second"
    )
    uv_index: float | None = Field(default=None, ge=0, description="UV index")
    condition: str = Field(default="", description="Provider condition text, e.g. 'Rain'")

    @property
    def hour(self) -> int:
        return self.time.hour
