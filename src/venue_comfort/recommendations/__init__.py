"""Wind trend, booking window and venue comparison recommendations."""

from venue_comfort.recommendations.comparison import compare_venues, score_venue
from venue_comfort.recommendations.time_slots import (
    WindowCandidate,
    best_window,
    find_best_provider_window,
    optimal_booking_window,
    score_comfort_hour,
    score_provider_hour,
)
from venue_comfort.recommendations.trend import wind_trend

__all__ = [
    "compare_venues",
    "score_venue",
    "WindowCandidate",
    "best_window",
    "find_best_provider_window",
    "optimal_booking_window",
    "score_comfort_hour",
    "score_provider_hour",
    "wind_trend",
]
