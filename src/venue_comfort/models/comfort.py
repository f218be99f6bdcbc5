"""Comfort, wind and exposure classification models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from venue_comfort.rounding import round_half_up


class ExposureCategory(str, Enum):
    """Wind exposure categories a venue can resolve to."""

    ROOFTOP = "rooftop"
    FLOATING = "floating"
    WATERFRONT = "waterfront"
    OPEN_PARK = "open_park"
    BEER_GARDEN = "beer_garden"
    COURTYARD = "courtyard"
    STREETSIDE = "streetside"
    INDOOR = "indoor"
    CAFE = "cafe"
    HOTEL = "hotel"


class ExposureProfile(BaseModel):
    """How much ambient wind reaches a venue.

    ``exposure`` is the fraction of ambient wind the venue is subject to,
    ``shelter_factor`` the fraction blocked. In the built-in table
    ``exposure == 1 - shelter_factor`` for every category.
    """

    model_config = ConfigDict(frozen=True)

    category: ExposureCategory
    exposure: float = Field(..., ge=0, le=1, description="Fraction of ambient wind reaching the venue")
    shelter_factor: float = Field(..., ge=0, le=1, description="Fraction of ambient wind blocked")
    label: str = Field(..., description="Display label, e.g. 'Rooftop - Fully Exposed'")
    venue_note: str | None = Field(default=None, description="Venue-specific wind note")


class ComfortTier(str, Enum):
    """Ordered apparent-temperature comfort tiers."""

    COLD = "cold"
    COOL = "cool"
    MILD = "mild"
    WARM = "warm"
    HOT = "hot"
    EXTREME = "extreme"
    UNKNOWN = "unknown"  # Missing input


class ComfortZone(BaseModel):
    """A comfort tier together with its display text."""

    model_config = ConfigDict(frozen=True)

    tier: ComfortTier
    label: str
    advice: str


class WindTier(str, Enum):
    """Ordered wind danger tiers for an effective wind speed."""

    CALM = "calm"  # < 5 m/s
    BREEZY = "breezy"  # 5-9 m/s
    WINDY = "windy"  # 9-14 m/s
    SEVERE = "severe"  # 14+ m/s


class WindWarning(BaseModel):
    """Wind danger classification at a venue."""

    model_config = ConfigDict(frozen=True)

    tier: WindTier
    label: str
    advice: str
    effective_wind_ms: float = Field(..., description="Ambient wind scaled by venue exposure")
    effective_wind_kmh: int = Field(..., description="Effective wind in km/h, rounded for display")
    exposure_label: str | None = Field(default=None, description="Venue exposure label")


class UVLevel(str, Enum):
    """UV index bands."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"
    EXTREME = "extreme"


class UVAdvice(BaseModel):
    """Sun protection advice for a venue at a given UV index."""

    level: UVLevel
    label: str = Field(..., description="Headline, e.g. 'UV 7 - Sunscreen essential'")
    detail: str = Field(..., description="Venue-specific detail")


class HourlyPoint(BaseModel):
    """One synthesized hour of venue conditions."""

    hour: int = Field(..., ge=0, le=23, description="Hour of day")
    label: str = Field(..., description="'Now' or e.g. '3pm'")
    temperature: int = Field(..., description="Temperature in Celsius, rounded")
    wind_kmh: int = Field(..., description="Ambient wind in km/h, rounded")
    wind_ms: float = Field(..., description="Ambient wind in m/s, one decimal")
    apparent_temperature: float | None = Field(
        default=None, description="Feels-like temperature in Celsius, one decimal"
    )
    comfort: ComfortZone
    wind_warning: WindWarning
    is_current: bool = False

    @property
    def comfort_tier(self) -> ComfortTier:
        return self.comfort.tier

    @property
    def wind_tier(self) -> WindTier:
        return self.wind_warning.tier

    @property
    def feels_like(self) -> int | None:
        """Apparent temperature rounded to whole degrees."""
        if self.apparent_temperature is None:
            return None
        return round_half_up(self.apparent_temperature)
