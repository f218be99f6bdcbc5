"""Tests for the diurnal forecast generator."""

import pytest

from venue_comfort.forecast.diurnal import (
    TEMP_OFFSETS,
    WIND_MULTIPLIERS,
    format_hour,
    generate_hourly_forecast,
)
from venue_comfort.models.comfort import ComfortTier, ExposureCategory, WindTier
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.rules.exposure import profile_for


class TestCurves:
    """Tests for the fixed diurnal tables."""

    def test_tables_cover_day(self):
        """Test both tables have one entry per hour."""
        assert len(WIND_MULTIPLIERS) == 24
        assert len(TEMP_OFFSETS) == 24

    def test_wind_peaks_at_four_pm(self):
        """Test the wind curve peaks at 16:00."""
        assert max(range(24), key=lambda h: WIND_MULTIPLIERS[h]) == 16

    def test_temperature_peaks_at_two_pm(self):
        """Test the temperature curve peaks at 14:00 and bottoms at 3am."""
        assert max(range(24), key=lambda h: TEMP_OFFSETS[h]) == 14
        assert min(range(24), key=lambda h: TEMP_OFFSETS[h]) == 3


class TestFormatHour:
    """Tests for hour labels."""

    @pytest.mark.parametrize(
        "hour,label",
        [(0, "12am"), (1, "1am"), (11, "11am"), (12, "12pm"), (13, "1pm"), (23, "11pm"), (24, "12am")],
    )
    def test_labels(self, hour, label):
        """Test 12-hour formatting."""
        assert format_hour(hour) == label


class TestGenerateHourlyForecast:
    """Tests for generate_hourly_forecast."""

    def test_returns_24_points(self, beer_garden_venue: VenueDescriptor):
        """Test a full day is generated."""
        series = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=9)
        assert len(series) == 24

    def test_first_point_is_now(self, beer_garden_venue: VenueDescriptor):
        """Test only the first point is current and labelled 'Now'."""
        series = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=9)

        assert series[0].is_current is True
        assert series[0].label == "Now"
        assert all(not p.is_current for p in series[1:])
        assert series[1].label == "10am"

    def test_wraps_at_midnight(self, beer_garden_venue: VenueDescriptor):
        """Test hours wrap around midnight."""
        series = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=22)

        assert [p.hour for p in series[:4]] == [22, 23, 0, 1]
        assert series[2].label == "12am"

    @pytest.mark.parametrize("hour", range(24))
    def test_anchored_to_live_sample(self, rooftop_venue: VenueDescriptor, hour):
        """Test the 'Now' point reproduces the live input at any hour."""
        series = generate_hourly_forecast(24.0, 10.0, 50.0, rooftop_venue, current_hour=hour)

        assert series[0].hour == hour
        assert series[0].temperature == round(24.0)
        assert series[0].wind_kmh == round(10.0 * 3.6)
        assert series[0].wind_ms == pytest.approx(10.0)

    def test_follows_diurnal_shape(self, beer_garden_venue: VenueDescriptor):
        """Test wind peaks at 4pm and temperature at 2pm."""
        series = generate_hourly_forecast(20.0, 6.0, 50.0, beer_garden_venue, current_hour=9)

        by_hour = {p.hour: p for p in series}
        windiest = max(series, key=lambda p: p.wind_ms)

        assert windiest.hour == 16
        assert windiest.wind_ms == pytest.approx(13.0)
        # 9am offset is 0, 2pm offset is +4
        assert by_hour[14].temperature == 24
        assert all(p.temperature <= 24 for p in series)
        assert by_hour[3].temperature == min(p.temperature for p in series)

    def test_half_degree_hours_round_up(self):
        """Test .5°C hour temperatures round up (16.5 -> 17, 18.5 -> 19)."""
        series = generate_hourly_forecast(
            20.0, 5.0, 50.0, VenueDescriptor(id="v"), current_hour=9
        )
        by_hour = {p.hour: p for p in series}

        # 1am and 5am offsets are -3.5, 9pm is -1.5
        assert by_hour[1].temperature == 17
        assert by_hour[5].temperature == 17
        assert by_hour[21].temperature == 19

    def test_rooftop_scenario(self, rooftop_venue: VenueDescriptor):
        """Test the rooftop end-to-end classification."""
        series = generate_hourly_forecast(24.0, 10.0, 50.0, rooftop_venue, current_hour=14)
        now = series[0]

        # 9.5 m/s reaches the rooftop: feels ~18.3°C, and 9.5 m/s is windy
        assert now.apparent_temperature == pytest.approx(18.3)
        assert now.comfort_tier == ComfortTier.MILD
        assert now.wind_tier == WindTier.WINDY

    def test_uses_given_profile(self, rooftop_venue: VenueDescriptor):
        """Test a pre-resolved profile overrides venue resolution."""
        exposed = generate_hourly_forecast(24.0, 10.0, 50.0, rooftop_venue, current_hour=14)
        sheltered = generate_hourly_forecast(
            24.0,
            10.0,
            50.0,
            rooftop_venue,
            current_hour=14,
            profile=profile_for(ExposureCategory.INDOOR),
        )

        assert sheltered[0].wind_tier == WindTier.CALM
        assert sheltered[0].apparent_temperature > exposed[0].apparent_temperature

    def test_missing_humidity_uses_default(self, rooftop_venue: VenueDescriptor):
        """Test None humidity behaves like the default humidity."""
        with_none = generate_hourly_forecast(24.0, 10.0, None, rooftop_venue, current_hour=14)
        with_fifty = generate_hourly_forecast(24.0, 10.0, 50.0, rooftop_venue, current_hour=14)

        assert [p.apparent_temperature for p in with_none] == [
            p.apparent_temperature for p in with_fifty
        ]

    def test_defaults_to_wall_clock(self, beer_garden_venue: VenueDescriptor):
        """Test the current hour defaults to the system clock."""
        series = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue)
        assert 0 <= series[0].hour <= 23
        assert series[0].label == "Now"

    @pytest.mark.parametrize("hour", [-1, 24])
    def test_invalid_hour(self, beer_garden_venue: VenueDescriptor, hour):
        """Test out-of-range hours raise ValueError."""
        with pytest.raises(ValueError):
            generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=hour)

    def test_regenerated_each_call(self, beer_garden_venue: VenueDescriptor):
        """Test repeated calls produce equal, independent series."""
        first = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=9)
        second = generate_hourly_forecast(20.0, 5.0, 60.0, beer_garden_venue, current_hour=9)

        assert first == second
        assert first is not second
