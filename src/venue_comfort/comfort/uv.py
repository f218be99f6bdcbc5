"""UV classification, sun protection and rain shelter advice."""

from __future__ import annotations

from datetime import datetime

from venue_comfort.models.comfort import UVAdvice, UVLevel
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.models.weather import WeatherSample
from venue_comfort.rounding import round_half_up


# (inclusive upper bound, level, label, advice), checked in order
UV_SCALE: tuple[tuple[float, UVLevel, str, str], ...] = (
    (2, UVLevel.LOW, "Low", "Safe all day"),
    (5, UVLevel.MODERATE, "Moderate", "Seek shade midday"),
    (7, UVLevel.HIGH, "High", "Sunscreen essential"),
    (10, UVLevel.VERY_HIGH, "Very High", "Extra protection needed"),
)
UV_EXTREME = (UVLevel.EXTREME, "Extreme", "Avoid sun 11am-4pm")

SHADE_TAGS = ("Shade", "Shaded", "Garden", "Covered")
UMBRELLA_TAGS = ("Umbrellas", "Beer Garden")
RAIN_SAFE_TAGS = ("Indoor", "Covered", "Shaded", "Veranda", "Roof")


def classify_uv(uv_index: float) -> tuple[UVLevel, str, str]:
    """Classify a UV index.

    Returns:
        (level, label, advice)
    """
    for upper, level, label, advice in UV_SCALE:
        if uv_index <= upper:
            return level, label, advice
    return UV_EXTREME


def sun_protection_advice(venue: VenueDescriptor, uv_index: float) -> UVAdvice:
    """Sun protection advice based on UV index and the venue's shade."""
    level, _, advice = classify_uv(uv_index)

    if uv_index >= 3:
        if venue.has_any_tag(SHADE_TAGS):
            detail = "Shaded terrace available"
        elif venue.has_any_tag(UMBRELLA_TAGS):
            detail = "Umbrellas provided"
        elif venue.has_tag("Indoor"):
            detail = "Indoor seating available"
        else:
            detail = "Limited shade, pack sunscreen"
    else:
        detail = "Enjoy the low UV morning"

    return UVAdvice(
        level=level,
        label=f"UV {round_half_up(uv_index)} - {advice}",
        detail=detail,
    )


def is_rain_safe(venue: VenueDescriptor) -> bool:
    """Check if a venue has covered or indoor space."""
    return venue.has_any_tag(RAIN_SAFE_TAGS)


def best_sun_safe_times(
    venue: VenueDescriptor,
    uv_index: float,
    current_hour: int | None = None,
) -> str:
    """Suggest when to visit given the UV index and the venue's shade.

    Args:
        venue: Venue being visited
        uv_index: Current UV index
        current_hour: Hour of day (0-23); defaults to the wall clock

    Returns:
        Short visiting-time hint

    Raises:
        ValueError: If current_hour is outside 0-23
    """
    if current_hour is None:
        current_hour = datetime.now().hour
    if not 0 <= current_hour <= 23:
        raise ValueError(f"current_hour must be between 0 and 23, got {current_hour}")

    if uv_index < 3:
        return "Safe any time today"
    if venue.has_any_tag(("Shaded", "Covered")):
        return "Ideal for any-time visits"

    # Peak UV window
    if 11 <= current_hour <= 16:
        return "Best after 4:00 PM"
    return "Great before 11:00 AM"


def rain_suggestion(
    venue: VenueDescriptor,
    sample: WeatherSample,
    rain_arrival_minutes: int | None = None,
) -> str | None:
    """Advice for a booking when it is raining or rain is close.

    Rain is active when the sample's condition is wet, or when
    ``rain_arrival_minutes`` is zero or negative.

    Args:
        venue: Venue being booked
        sample: Current weather
        rain_arrival_minutes: Minutes until rain arrives, if forecast

    Returns:
        Advice text, or None when no rain is due within the hour
    """
    safe = is_rain_safe(venue)
    raining = sample.condition.is_wet() or (
        rain_arrival_minutes is not None and rain_arrival_minutes <= 0
    )

    if raining:
        if safe:
            return "Venue has covered area - rain won't affect your booking"
        return "Rain active - mostly outdoor seating. Grab a raincoat"

    if rain_arrival_minutes is not None and rain_arrival_minutes <= 60:
        if safe:
            return "Storm approaching, but you're covered here"
        return f"Rain arriving in {rain_arrival_minutes}m - outdoor area will be affected"

    return None
