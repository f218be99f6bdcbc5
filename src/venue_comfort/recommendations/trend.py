"""Wind trend analysis over an hourly series."""

from __future__ import annotations

from collections.abc import Sequence

from venue_comfort.models.comfort import HourlyPoint
from venue_comfort.models.recommendation import WindTrend, WindTrendDirection


TREND_LABELS: dict[WindTrendDirection, str] = {
    WindTrendDirection.BUILDING: "Wind building through afternoon",
    WindTrendDirection.CALMING: "Winds calming down",
    WindTrendDirection.STEADY: "Wind conditions steady",
}


def _trend(direction: WindTrendDirection) -> WindTrend:
    return WindTrend(direction=direction, label=TREND_LABELS[direction])


def wind_trend(
    series: Sequence[HourlyPoint],
    ratio_threshold: float = 0.3,
    delta_threshold_ms: float = 3.0,
) -> WindTrend:
    """Classify whether the wind is building, calming or steady.

    Compares the current wind against four hours ahead (two hours ahead
    when the series is too short to reach four). The change counts as
    significant when it exceeds ``ratio_threshold`` of the current wind
    or ``delta_threshold_ms`` in absolute terms.

    Args:
        series: Hourly points, index 0 being now
        ratio_threshold: Relative change considered significant
        delta_threshold_ms: Absolute change (m/s) considered significant

    Returns:
        WindTrend; steady when fewer than 4 points are available
    """
    if len(series) < 4:
        return _trend(WindTrendDirection.STEADY)

    now = series[0].wind_ms
    later = series[4].wind_ms if len(series) > 4 else series[2].wind_ms

    delta = later - now
    ratio = delta / now if now > 0 else delta

    if ratio > ratio_threshold or delta > delta_threshold_ms:
        return _trend(WindTrendDirection.BUILDING)
    if ratio < -ratio_threshold or delta < -delta_threshold_ms:
        return _trend(WindTrendDirection.CALMING)
    return _trend(WindTrendDirection.STEADY)
