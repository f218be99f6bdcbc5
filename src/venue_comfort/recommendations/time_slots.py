"""Best-window finder for booking recommendations.

Both the synthetic comfort series and raw provider hourly data are
searched with the same algorithm: score every hour, slide a fixed-width
window across the series, and keep the first window with the highest
summed score. Only the hourly scoring function differs.

Example:
    ```python
    series = generate_hourly_forecast(24, 6, 55, venue, current_hour=9)
    window = optimal_booking_window(series)
    if window:
        print(f"Best time: {window.label} ({window.reason})")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from venue_comfort.comfort.classifiers import classify_wind
from venue_comfort.forecast.diurnal import format_hour
from venue_comfort.models.comfort import (
    ComfortTier,
    ExposureProfile,
    HourlyPoint,
    WindTier,
)
from venue_comfort.models.recommendation import BookingWindow, ProviderWindow
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.models.weather import ProviderHour
from venue_comfort.rounding import round_half_up
from venue_comfort.rules.exposure import resolve_exposure

T = TypeVar("T")

COMFORT_SCORES: dict[ComfortTier, int] = {
    ComfortTier.WARM: 5,
    ComfortTier.MILD: 4,
    ComfortTier.COOL: 2,
    ComfortTier.HOT: 1,
}

WIND_SCORES: dict[WindTier, int] = {
    WindTier.CALM: 3,
    WindTier.BREEZY: 1,
    WindTier.WINDY: -1,
    WindTier.SEVERE: -3,
}


@dataclass
class WindowCandidate(Generic[T]):
    """A scored window of consecutive items."""

    start_idx: int
    items: list[T]
    scores: list[float] = field(default_factory=list)

    @property
    def end_idx(self) -> int:
        """Index of the last item in the window (inclusive)."""
        return self.start_idx + len(self.items) - 1

    @property
    def total(self) -> float:
        return sum(self.scores)

    @property
    def average(self) -> float:
        if not self.scores:
            return 0
        return self.total / len(self.scores)


def best_window(
    items: Sequence[T],
    score: Callable[[T], float],
    window_size: int = 3,
) -> WindowCandidate[T] | None:
    """Find the highest-scoring run of ``window_size`` consecutive items.

    Ties go to the earliest window.

    Args:
        items: Hourly items in time order
        score: Scoring function applied to each item once
        window_size: Number of consecutive items per window

    Returns:
        The best WindowCandidate, or None if there are fewer items than
        ``window_size``

    Raises:
        ValueError: If window_size is less than 1
    """
    if window_size < 1:
        raise ValueError(f"window_size must be at least 1, got {window_size}")
    if len(items) < window_size:
        return None

    scores = [score(item) for item in items]

    best_start = 0
    best_total = float("-inf")
    for start in range(len(items) - window_size + 1):
        total = sum(scores[start : start + window_size])
        if total > best_total:
            best_total = total
            best_start = start

    end = best_start + window_size
    return WindowCandidate(
        start_idx=best_start,
        items=list(items[best_start:end]),
        scores=scores[best_start:end],
    )


def score_comfort_hour(point: HourlyPoint) -> int:
    """Score a synthesized hour for outdoor comfort (higher is better)."""
    score = COMFORT_SCORES.get(point.comfort_tier, 0)
    score += WIND_SCORES[point.wind_tier]

    # Daytime bonus, people prefer daytime events
    if 9 <= point.hour <= 21:
        score += 1
    if 10 <= point.hour <= 16:
        score += 1

    return score


def optimal_booking_window(
    series: Sequence[HourlyPoint],
    score: Callable[[HourlyPoint], float] = score_comfort_hour,
    window_size: int = 3,
) -> BookingWindow | None:
    """Find the best booking window in a synthesized hourly series.

    Args:
        series: Hourly points from the diurnal forecast
        score: Hourly scoring function
        window_size: Window length in hours

    Returns:
        BookingWindow, or None if the series is shorter than the window
    """
    candidate = best_window(series, score, window_size)
    if candidate is None:
        return None

    first = candidate.items[0]
    last = candidate.items[-1]
    end_hour = (last.hour + 1) % 24

    feels = [p.apparent_temperature for p in candidate.items if p.apparent_temperature is not None]
    avg_feels = round_half_up(sum(feels) / len(feels), 1) if feels else None

    wind_label = first.wind_warning.label.lower()
    if avg_feels is not None:
        reason = f"Feels like {round_half_up(avg_feels)}°C, {wind_label}"
    else:
        reason = first.wind_warning.label

    return BookingWindow(
        start_hour=first.hour,
        end_hour=end_hour,
        start_label=format_hour(first.hour),
        end_label=format_hour(end_hour),
        average_apparent_temperature=avg_feels,
        wind_tier=first.wind_tier,
        reason=reason,
        score=candidate.total,
    )


def score_provider_hour(
    hour: ProviderHour,
    venue: VenueDescriptor,
    profile: ExposureProfile | None = None,
) -> int:
    """Score one hour of provider data for a venue (0-100).

    Args:
        hour: Provider hourly record
        venue: Venue being booked (shade tags soften UV)
        profile: Pre-resolved exposure profile for the venue

    Returns:
        Comfort score clamped to 0-100
    """
    profile = profile or resolve_exposure(venue)
    temp = hour.temperature_c if hour.temperature_c is not None else 20
    uvi = hour.uv_index or 0
    condition = (hour.condition or "").lower()

    score = 70

    # Temperature (21-26 is optimal)
    if 21 <= temp <= 26:
        score += 20
    elif temp < 18 or temp > 30:
        score -= 20

    wind = classify_wind(hour.wind_speed_ms, profile)
    if wind.tier == WindTier.CALM:
        score += 10
    elif wind.tier == WindTier.SEVERE:
        score -= 30

    if uvi > 8 and not venue.has_tag("Shaded"):
        score -= 15

    if "rain" in condition:
        score -= 50
    if "cloud" in condition:
        score -= 5

    return max(0, min(100, score))


def find_best_provider_window(
    hours: Sequence[ProviderHour],
    venue: VenueDescriptor,
    window_size: int = 3,
) -> ProviderWindow | None:
    """Find the best window in raw provider hourly data.

    Args:
        hours: Provider hourly records in time order
        venue: Venue being booked
        window_size: Window length in hours

    Returns:
        ProviderWindow, or None if there is not enough data
    """
    profile = resolve_exposure(venue)
    candidate = best_window(
        hours,
        lambda h: score_provider_hour(h, venue, profile),
        window_size,
    )
    if candidate is None:
        return None

    start = candidate.items[0].hour
    end = (candidate.items[-1].hour + 1) % 24

    return ProviderWindow(
        start_hour=start,
        end_hour=end,
        label=f"{format_hour(start)} - {format_hour(end)}",
        score=round_half_up(candidate.average),
    )
