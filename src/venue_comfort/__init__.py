"""Venue comfort and wind safety engine.

Derives feels-like temperature, comfort and wind danger tiers, a
synthetic 24-hour forecast, the wind trend and the best booking window
for a venue from a single live weather sample.
"""

from venue_comfort.comfort import (
    apparent_temperature,
    best_sun_safe_times,
    classify_comfort,
    classify_uv,
    classify_wind,
    is_rain_safe,
    rain_suggestion,
    sun_protection_advice,
    wind_alert_message,
    wind_chill_impact,
    wind_impact_explanation,
)
from venue_comfort.forecast import generate_hourly_forecast
from venue_comfort.models import (
    BookingWindow,
    ComfortTier,
    ExposureCategory,
    ExposureProfile,
    HourlyPoint,
    ProviderHour,
    VenueDescriptor,
    WeatherSample,
    WindTier,
    WindTrend,
    WindTrendDirection,
)
from venue_comfort.recommendations import (
    best_window,
    compare_venues,
    find_best_provider_window,
    optimal_booking_window,
    wind_trend,
)
from venue_comfort.rules import detect_exposure, resolve_exposure

__version__ = "0.1.0"

__all__ = [
    "apparent_temperature",
    "best_sun_safe_times",
    "classify_comfort",
    "classify_uv",
    "classify_wind",
    "is_rain_safe",
    "rain_suggestion",
    "sun_protection_advice",
    "wind_alert_message",
    "wind_chill_impact",
    "wind_impact_explanation",
    "generate_hourly_forecast",
    "BookingWindow",
    "ComfortTier",
    "ExposureCategory",
    "ExposureProfile",
    "HourlyPoint",
    "ProviderHour",
    "VenueDescriptor",
    "WeatherSample",
    "WindTier",
    "WindTrend",
    "WindTrendDirection",
    "best_window",
    "compare_venues",
    "find_best_provider_window",
    "optimal_booking_window",
    "wind_trend",
    "detect_exposure",
    "resolve_exposure",
]
