"""Synthetic 24-hour venue forecast from a single live sample.

The generator does not call any forecast API. It stretches one live
observation over the day using fixed diurnal shape curves:

- wind: calm mornings, building to a peak around 4pm, easing by evening
- temperature: trough before dawn, peak mid-afternoon

Both curves are anchored to the live sample. The current wind is divided
by the current hour's multiplier to recover a base wind, and the current
hour's offset is subtracted from the temperature to recover a base
temperature. Every hour is then regenerated from the base, so the "Now"
point reproduces the live sample.
"""

from __future__ import annotations

import logging
from datetime import datetime

from venue_comfort.comfort.apparent import apparent_temperature
from venue_comfort.comfort.classifiers import classify_comfort, classify_wind
from venue_comfort.models.comfort import ExposureProfile, HourlyPoint
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.rounding import round_half_up
from venue_comfort.rules.exposure import resolve_exposure

logger = logging.getLogger(__name__)


# Relative wind strength by hour of day
WIND_MULTIPLIERS: tuple[float, ...] = (
    0.3, 0.25, 0.2, 0.2, 0.25, 0.3,  # 0-5
    0.35, 0.4, 0.5, 0.6, 0.7, 0.85,  # 6-11
    0.95, 1.05, 1.15, 1.25, 1.3, 1.2,  # 12-17
    1.0, 0.8, 0.65, 0.5, 0.4, 0.35,  # 18-23
)

# Temperature deviation (°C) by hour of day
TEMP_OFFSETS: tuple[float, ...] = (
    -3, -3.5, -4, -4.5, -4, -3.5,  # 0-5
    -3, -2, -1, 0, 1, 2,  # 6-11
    3, 3.5, 4, 3.5, 3, 2,  # 12-17
    1, 0, -1, -1.5, -2, -2.5,  # 18-23
)


def format_hour(hour: int) -> str:
    """Format an hour of day as a 12-hour label, e.g. '12am', '3pm'."""
    hour %= 24
    display = hour % 12 or 12
    suffix = "pm" if hour >= 12 else "am"
    return f"{display}{suffix}"


def generate_hourly_forecast(
    temp_c: float,
    wind_ms: float,
    humidity_percent: float | None,
    venue: VenueDescriptor,
    current_hour: int | None = None,
    profile: ExposureProfile | None = None,
    default_humidity: float = 50.0,
) -> list[HourlyPoint]:
    """Generate 24 hourly points for a venue starting at the current hour.

    Args:
        temp_c: Current temperature in Celsius
        wind_ms: Current ambient wind speed in m/s
        humidity_percent: Current relative humidity (may be None)
        venue: Venue whose exposure shapes feels-like and wind tiers
        current_hour: Hour of day for "now"; defaults to the wall clock
        profile: Pre-resolved exposure profile; resolved from the venue
            if not given
        default_humidity: Humidity assumed when humidity_percent is None

    Returns:
        24 HourlyPoints, index 0 being the current hour

    Raises:
        ValueError: If current_hour is outside 0-23
    """
    if current_hour is None:
        current_hour = datetime.now().hour
    if not 0 <= current_hour <= 23:
        raise ValueError(f"current_hour must be between 0 and 23, got {current_hour}")

    profile = profile or resolve_exposure(venue)

    base_wind = wind_ms / WIND_MULTIPLIERS[current_hour]
    base_temp = temp_c - TEMP_OFFSETS[current_hour]
    logger.debug(
        f"Anchoring forecast for venue {venue.id} at hour {current_hour}: "
        f"base wind {base_wind:.2f} m/s, base temp {base_temp:.1f}°C"
    )

    points: list[HourlyPoint] = []
    for i in range(24):
        hour = (current_hour + i) % 24
        hour_wind = base_wind * WIND_MULTIPLIERS[hour]
        hour_temp = base_temp + TEMP_OFFSETS[hour]

        feels_like = apparent_temperature(
            hour_temp,
            hour_wind,
            humidity_percent,
            profile.shelter_factor,
            default_humidity=default_humidity,
        )

        points.append(
            HourlyPoint(
                hour=hour,
                label="Now" if i == 0 else format_hour(hour),
                temperature=round_half_up(hour_temp),
                wind_kmh=round_half_up(hour_wind * 3.6),
                wind_ms=round_half_up(hour_wind, 1),
                apparent_temperature=feels_like,
                comfort=classify_comfort(feels_like),
                wind_warning=classify_wind(hour_wind, profile),
                is_current=i == 0,
            )
        )

    return points
