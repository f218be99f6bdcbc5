"""Apparent (feels-like) temperature.

Uses the Australian Bureau of Meteorology apparent temperature model:

    AT = Ta + 0.33 * e - 0.70 * ws - 4.00

Where:
    Ta = air temperature (°C)
    e  = water vapour pressure (hPa)
         = rh/100 * 6.105 * exp(17.27 * Ta / (237.7 + Ta))
    ws = wind speed (m/s), here attenuated by the venue's shelter factor

The result is not clamped. Very hot and humid inputs can produce values
outside the physically plausible range, matching the reference formula.
"""

from __future__ import annotations

import math

from venue_comfort.models.comfort import ExposureProfile
from venue_comfort.rounding import round_half_up


def vapour_pressure(temp_c: float, humidity_percent: float) -> float:
    """Water vapour pressure in hPa."""
    return (humidity_percent / 100) * 6.105 * math.exp(
        (17.27 * temp_c) / (237.7 + temp_c)
    )


def apparent_temperature(
    temp_c: float | None,
    wind_ms: float | None,
    humidity_percent: float | None = None,
    shelter_factor: float = 0.0,
    default_humidity: float = 50.0,
) -> float | None:
    """Calculate apparent temperature at a venue.

    Args:
        temp_c: Air temperature in Celsius
        wind_ms: Ambient wind speed in m/s (zero or negative is calm)
        humidity_percent: Relative humidity; ``default_humidity`` if None
        shelter_factor: Fraction of wind blocked by the venue (0-1)
        default_humidity: Humidity assumed when none is reported

    Returns:
        Apparent temperature rounded to one decimal, or None if
        temperature or wind is missing
    """
    if temp_c is None or wind_ms is None:
        return None

    rh = default_humidity if humidity_percent is None else humidity_percent
    e = vapour_pressure(temp_c, rh)
    effective_wind = wind_ms * (1 - shelter_factor)

    at = temp_c + 0.33 * e - 0.70 * effective_wind - 4.00
    return round_half_up(at, 1)


def wind_chill_impact(
    temp_c: float | None,
    wind_ms: float | None,
    shelter_factor: float = 0.0,
) -> float | None:
    """How many degrees cooler it feels than the air temperature.

    Evaluated at 50% humidity. Negative values mean it feels warmer.
    """
    feels_like = apparent_temperature(temp_c, wind_ms, 50.0, shelter_factor)
    if feels_like is None:
        return None
    return round_half_up(temp_c - feels_like, 1)


def wind_impact_explanation(
    temp_c: float | None,
    wind_ms: float | None,
    apparent_c: float | None,
    profile: ExposureProfile,
) -> str | None:
    """One-line explanation of how the wind changes comfort.

    Example: "32km/h wind makes 24°C feel like 21°C"
    """
    if temp_c is None or wind_ms is None or apparent_c is None:
        return None

    effective_kmh = round_half_up(wind_ms * profile.exposure * 3.6)
    diff = round_half_up(temp_c - apparent_c)
    actual = round_half_up(temp_c)
    feels = round_half_up(apparent_c)

    if abs(diff) < 1:
        return f"{effective_kmh}km/h wind has minimal effect on comfort"
    if diff > 0:
        return f"{effective_kmh}km/h wind makes {actual}°C feel like {feels}°C"
    return f"Calm conditions make {actual}°C feel like {feels}°C"
