"""Comfort and wind danger classification.

Tier thresholds are strict upper bounds: a value exactly on a boundary
belongs to the higher tier (22.0°C is warm, not mild; 9.0 m/s is windy,
not breezy).
"""

from __future__ import annotations

from venue_comfort.models.comfort import (
    ComfortTier,
    ComfortZone,
    ExposureProfile,
    WindTier,
    WindWarning,
)
from venue_comfort.rounding import round_half_up


# (exclusive upper bound °C, zone), checked in order
COMFORT_ZONES: tuple[tuple[float, ComfortZone], ...] = (
    (10, ComfortZone(
        tier=ComfortTier.COLD,
        label="Feels Cold",
        advice="Bring warm jackets for outdoor seating",
    )),
    (16, ComfortZone(
        tier=ComfortTier.COOL,
        label="Feels Cool",
        advice="A light jacket recommended for outdoor areas",
    )),
    (22, ComfortZone(
        tier=ComfortTier.MILD,
        label="Comfortable - Mild",
        advice="Lovely outdoor conditions",
    )),
    (28, ComfortZone(
        tier=ComfortTier.WARM,
        label="Comfortable - Warm",
        advice="Perfect outdoor conditions",
    )),
    (34, ComfortZone(
        tier=ComfortTier.HOT,
        label="Feels Hot",
        advice="Seek shade or breeze, stay hydrated",
    )),
)

EXTREME_ZONE = ComfortZone(
    tier=ComfortTier.EXTREME,
    label="Extreme Heat",
    advice="Indoor seating strongly recommended",
)

UNKNOWN_ZONE = ComfortZone(
    tier=ComfortTier.UNKNOWN,
    label="Unknown",
    advice="Weather data unavailable",
)

# (exclusive upper bound m/s, tier), checked in order
WIND_THRESHOLDS: tuple[tuple[float, WindTier], ...] = (
    (5, WindTier.CALM),
    (9, WindTier.BREEZY),
    (14, WindTier.WINDY),
)

WIND_TEXT: dict[WindTier, tuple[str, str]] = {
    WindTier.CALM: ("Calm Conditions", "Perfect for outdoor events"),
    WindTier.BREEZY: ("Moderate Breeze", "Secure lightweight decorations"),
    WindTier.WINDY: ("Windy", "Recommend secure tent anchoring and marquee weights"),
    WindTier.SEVERE: (
        "High Wind Warning",
        "Outdoor events not recommended, indoor backup advised",
    ),
}


def classify_comfort(apparent_c: float | None) -> ComfortZone:
    """Bucket an apparent temperature into a comfort zone.

    Returns the ``unknown`` zone for missing input instead of failing.
    """
    if apparent_c is None:
        return UNKNOWN_ZONE

    for upper, zone in COMFORT_ZONES:
        if apparent_c < upper:
            return zone
    return EXTREME_ZONE


def wind_tier_for(effective_wind_ms: float) -> WindTier:
    """Bucket an effective (exposure-scaled) wind speed into a tier."""
    for upper, tier in WIND_THRESHOLDS:
        if effective_wind_ms < upper:
            return tier
    return WindTier.SEVERE


def classify_wind(wind_ms: float | None, profile: ExposureProfile) -> WindWarning:
    """Classify wind danger at a venue.

    The ambient wind is scaled by the venue's exposure before
    classification. Missing wind is treated as calm air.

    Args:
        wind_ms: Ambient wind speed in m/s
        profile: Venue exposure profile

    Returns:
        WindWarning with tier, display text and effective wind
    """
    effective = (wind_ms or 0) * profile.exposure
    tier = wind_tier_for(effective)
    label, advice = WIND_TEXT[tier]

    return WindWarning(
        tier=tier,
        label=label,
        advice=advice,
        effective_wind_ms=effective,
        effective_wind_kmh=round_half_up(effective * 3.6),
        exposure_label=profile.label,
    )


def wind_alert_message(
    warning: WindWarning,
    venue_name: str,
    day_label: str | None = None,
) -> str:
    """Notification-style alert text for a wind warning."""
    day = day_label or "today"

    if warning.tier == WindTier.SEVERE:
        return f"Wind alert for {venue_name} {day}: indoor backup strongly recommended"
    if warning.tier == WindTier.WINDY:
        return f"Windy conditions expected at {venue_name} {day}: secure outdoor setup"
    if warning.tier == WindTier.BREEZY:
        return (
            f"Moderate breeze at {venue_name} {day}: "
            "lightweight items may need securing"
        )
    return f"Calm conditions at {venue_name} {day}: perfect for outdoor events"
