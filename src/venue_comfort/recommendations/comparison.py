"""Compare venues under the same weather to pick the best choice."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from venue_comfort.comfort.apparent import apparent_temperature
from venue_comfort.comfort.classifiers import classify_comfort, classify_wind
from venue_comfort.models.comfort import ComfortTier, WindTier
from venue_comfort.models.recommendation import VenueComparison, VenueReport
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.models.weather import WeatherCondition, WeatherSample
from venue_comfort.rounding import round_half_up
from venue_comfort.rules.exposure import resolve_exposure

logger = logging.getLogger(__name__)


WIND_POINTS: dict[WindTier, int] = {
    WindTier.CALM: 40,
    WindTier.BREEZY: 20,
}

COMFORT_POINTS: dict[ComfortTier, int] = {
    ComfortTier.WARM: 20,
    ComfortTier.MILD: 15,
    ComfortTier.COOL: 5,
    ComfortTier.HOT: 5,
}


def score_venue(
    venue: VenueDescriptor,
    sample: WeatherSample,
    default_humidity: float = 50.0,
) -> VenueReport:
    """Score a single venue against a weather sample."""
    profile = resolve_exposure(venue)
    wind = classify_wind(sample.wind_speed_ms, profile)
    feels_like = apparent_temperature(
        sample.temperature_c,
        sample.wind_speed_ms,
        sample.humidity_percent,
        profile.shelter_factor,
        default_humidity=default_humidity,
    )
    comfort = classify_comfort(feels_like)

    score = WIND_POINTS.get(wind.tier, 0)
    score += COMFORT_POINTS.get(comfort.tier, 0)
    if sample.condition == WeatherCondition.CLEAR:
        score += 30
    if venue.has_tag("Shaded") and (sample.uv_index or 0) > 6:
        score += 20

    return VenueReport(
        venue_id=venue.id,
        venue_name=venue.display_name(),
        score=score,
        wind_tier=wind.tier,
        wind_label=wind.label,
        apparent_temperature=feels_like,
        comfort_tier=comfort.tier,
    )


def compare_venues(
    venues: Sequence[VenueDescriptor],
    sample: WeatherSample,
    default_humidity: float = 50.0,
) -> VenueComparison | None:
    """Compare two or more venues and recommend the best one.

    Ties go to the venue listed first.

    Args:
        venues: Venues to compare
        sample: Current weather, shared by all venues
        default_humidity: Humidity assumed when the sample has none

    Returns:
        VenueComparison, or None when fewer than two venues are given
    """
    if len(venues) < 2:
        return None

    reports = [score_venue(v, sample, default_humidity) for v in venues]
    best = max(reports, key=lambda r: r.score)
    logger.debug(f"Compared {len(reports)} venues, best is {best.venue_id} ({best.score})")

    detail = best.wind_label.lower()
    if best.apparent_temperature is not None:
        detail += f", feels like {round_half_up(best.apparent_temperature)}°C"

    return VenueComparison(
        reports=reports,
        best_venue_id=best.venue_id,
        recommendation=f"Best choice: {best.venue_name} ({detail})",
    )
