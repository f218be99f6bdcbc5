"""Pytest fixtures for venue comfort tests.

This module provides test fixtures that ensure:
1. Settings are loaded fresh for every test (no cached environment)
2. Venues and series are built from fixed inputs, never the wall clock
"""

from datetime import datetime

import pytest

from venue_comfort.comfort.classifiers import classify_comfort, classify_wind
from venue_comfort.forecast.diurnal import format_hour
from venue_comfort.models.comfort import (
    ExposureCategory,
    ExposureProfile,
    HourlyPoint,
)
from venue_comfort.models.venue import Coordinates, VenueDescriptor
from venue_comfort.models.weather import ProviderHour, WeatherCondition, WeatherSample


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from venue_comfort.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Venues and profiles
# =============================================================================


@pytest.fixture
def rooftop_venue() -> VenueDescriptor:
    """Fully exposed CBD rooftop."""
    return VenueDescriptor(
        id="dv-02",
        name="CQ City Bar",
        vibe="Rooftop Courtyard",
        tags=("Cozy", "After Work", "Rooftop"),
        coordinates=Coordinates(latitude=-37.8136, longitude=144.9631),
        wind_note="This rooftop gets afternoon bay breezes from the south",
    )


@pytest.fixture
def courtyard_venue() -> VenueDescriptor:
    """Sheltered, shaded courtyard."""
    return VenueDescriptor(
        id="dv-23",
        name="Hidden Courtyard",
        vibe="Courtyard",
        tags=("Shaded", "Pet Friendly"),
    )


@pytest.fixture
def beer_garden_venue() -> VenueDescriptor:
    """Moderately exposed beer garden."""
    return VenueDescriptor(
        id=1,
        name="Wonderland",
        vibe="Beer Garden",
        tags=("Sunny", "Garden", "Beer Garden", "Pet Friendly"),
    )


@pytest.fixture
def unit_profile() -> ExposureProfile:
    """Profile passing ambient wind through unchanged (exposure 1.0)."""
    return ExposureProfile(
        category=ExposureCategory.ROOFTOP,
        exposure=1.0,
        shelter_factor=0.0,
        label="Test - Fully Exposed",
    )


# =============================================================================
# Weather
# =============================================================================


@pytest.fixture
def sample_weather() -> WeatherSample:
    """Warm, fairly windy clear afternoon."""
    return WeatherSample(
        temperature_c=24.0,
        wind_speed_ms=10.0,
        humidity_percent=50.0,
        condition=WeatherCondition.CLEAR,
        uv_index=7.0,
    )


@pytest.fixture
def point_factory(unit_profile: ExposureProfile):
    """Build HourlyPoints with chosen apparent temperature and wind.

    Wind tiers are computed with a unit-exposure profile, so ``wind_ms``
    maps directly onto the wind thresholds.
    """

    def make_point(
        hour: int,
        apparent: float | None = 20.0,
        wind_ms: float = 2.0,
        is_current: bool = False,
    ) -> HourlyPoint:
        return HourlyPoint(
            hour=hour,
            label="Now" if is_current else format_hour(hour),
            temperature=round(apparent) if apparent is not None else 0,
            wind_kmh=round(wind_ms * 3.6),
            wind_ms=wind_ms,
            apparent_temperature=apparent,
            comfort=classify_comfort(apparent),
            wind_warning=classify_wind(wind_ms, unit_profile),
            is_current=is_current,
        )

    return make_point


@pytest.fixture
def wind_series(point_factory):
    """Build a series from a list of wind speeds (hours starting at 9)."""

    def make_series(winds: list[float]) -> list[HourlyPoint]:
        return [
            point_factory(hour=(9 + i) % 24, wind_ms=w, is_current=i == 0)
            for i, w in enumerate(winds)
        ]

    return make_series


@pytest.fixture
def provider_day() -> list[ProviderHour]:
    """Provider hours 8am-7pm with a warm, clear 2pm-5pm block."""
    base = datetime(2024, 1, 15, 8, 0)
    hours = []
    for i in range(12):
        time = base.replace(hour=8 + i)
        if 14 <= time.hour <= 16:
            temp = 23.0
        else:
            temp = 19.0
        hours.append(
            ProviderHour(
                time=time,
                temperature_c=temp,
                wind_speed_ms=2.0,
                uv_index=4.0,
                condition="Clear",
            )
        )
    return hours
