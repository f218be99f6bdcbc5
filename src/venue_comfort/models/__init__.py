"""Domain models for venue comfort analysis."""

from venue_comfort.models.venue import Coordinates, VenueDescriptor
from venue_comfort.models.weather import (
    ProviderHour,
    WeatherCondition,
    WeatherSample,
)
from venue_comfort.models.comfort import (
    ComfortTier,
    ComfortZone,
    ExposureCategory,
    ExposureProfile,
    HourlyPoint,
    UVAdvice,
    UVLevel,
    WindTier,
    WindWarning,
)
from venue_comfort.models.recommendation import (
    BookingWindow,
    ProviderWindow,
    VenueComparison,
    VenueReport,
    WindTrend,
    WindTrendDirection,
)

__all__ = [
    # Venue
    "Coordinates",
    "VenueDescriptor",
    # Weather
    "ProviderHour",
    "WeatherCondition",
    "WeatherSample",
    # Comfort
    "ComfortTier",
    "ComfortZone",
    "ExposureCategory",
    "ExposureProfile",
    "HourlyPoint",
    "UVAdvice",
    "UVLevel",
    "WindTier",
    "WindWarning",
    # Recommendation
    "BookingWindow",
    "ProviderWindow",
    "VenueComparison",
    "VenueReport",
    "WindTrend",
    "WindTrendDirection",
]
