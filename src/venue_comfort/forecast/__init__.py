"""Synthetic diurnal forecasts."""

from venue_comfort.forecast.diurnal import (
    TEMP_OFFSETS,
    WIND_MULTIPLIERS,
    format_hour,
    generate_hourly_forecast,
)

__all__ = [
    "TEMP_OFFSETS",
    "WIND_MULTIPLIERS",
    "format_hour",
    "generate_hourly_forecast",
]
