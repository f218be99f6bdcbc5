"""Apparent temperature and comfort/wind/UV classification."""

from venue_comfort.comfort.apparent import (
    apparent_temperature,
    vapour_pressure,
    wind_chill_impact,
    wind_impact_explanation,
)
from venue_comfort.comfort.classifiers import (
    classify_comfort,
    classify_wind,
    wind_alert_message,
    wind_tier_for,
)
from venue_comfort.comfort.uv import (
    best_sun_safe_times,
    classify_uv,
    is_rain_safe,
    rain_suggestion,
    sun_protection_advice,
)

__all__ = [
    "apparent_temperature",
    "vapour_pressure",
    "wind_chill_impact",
    "wind_impact_explanation",
    "classify_comfort",
    "classify_wind",
    "wind_alert_message",
    "wind_tier_for",
    "best_sun_safe_times",
    "classify_uv",
    "is_rain_safe",
    "rain_suggestion",
    "sun_protection_advice",
]
