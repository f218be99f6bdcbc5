"""Command-line interface for venue comfort analysis."""

from __future__ import annotations

import argparse
import logging
import sys

from venue_comfort import __version__
from venue_comfort.comfort.apparent import apparent_temperature, wind_impact_explanation
from venue_comfort.comfort.classifiers import classify_comfort, classify_wind
from venue_comfort.comfort.uv import (
    best_sun_safe_times,
    rain_suggestion,
    sun_protection_advice,
)
from venue_comfort.config import Settings, get_settings
from venue_comfort.forecast.diurnal import generate_hourly_forecast
from venue_comfort.models.venue import VenueDescriptor
from venue_comfort.models.weather import WeatherSample
from venue_comfort.recommendations.time_slots import optimal_booking_window
from venue_comfort.recommendations.trend import wind_trend
from venue_comfort.rules.exposure import resolve_exposure

logger = logging.getLogger(__name__)


def _add_venue_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--id", default="cli", help="Venue identifier")
    parser.add_argument("--name", default=None, help="Venue name")
    parser.add_argument("--vibe", default="", help="Venue vibe, e.g. 'Rooftop Courtyard'")
    parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=[],
        help="Venue tag (repeatable), e.g. --tag Rooftop --tag Cozy",
    )


def _add_weather_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--temp", type=float, required=True, help="Temperature in °C")
    parser.add_argument("--wind", type=float, required=True, help="Wind speed in m/s")
    parser.add_argument("--humidity", type=float, default=None, help="Relative humidity %%")


def _add_hour_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--hour",
        type=int,
        default=None,
        choices=range(24),
        metavar="HOUR",
        help="Current hour of day (0-23), defaults to the wall clock",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="venue-comfort",
        description="Venue Comfort - feels-like temperature and wind safety for venues",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Exposure command
    exposure_parser = subparsers.add_parser(
        "exposure", help="Resolve a venue's wind exposure profile"
    )
    _add_venue_arguments(exposure_parser)

    # Now command
    now_parser = subparsers.add_parser(
        "now", help="Classify current comfort and wind at a venue"
    )
    _add_weather_arguments(now_parser)
    _add_venue_arguments(now_parser)
    _add_hour_argument(now_parser)
    now_parser.add_argument("--uv", type=float, default=None, help="UV index")
    now_parser.add_argument(
        "--condition", default=None, help="Sky condition, e.g. 'Clear' or 'light rain'"
    )
    now_parser.add_argument(
        "--rain-in",
        dest="rain_in",
        type=int,
        default=None,
        metavar="MINUTES",
        help="Minutes until forecast rain arrives",
    )

    # Forecast command
    forecast_parser = subparsers.add_parser(
        "forecast", help="Synthesize a 24-hour venue forecast and best booking window"
    )
    _add_weather_arguments(forecast_parser)
    _add_venue_arguments(forecast_parser)
    _add_hour_argument(forecast_parser)

    return parser


def _venue_from_args(args: argparse.Namespace) -> VenueDescriptor:
    return VenueDescriptor(id=args.id, name=args.name, vibe=args.vibe, tags=args.tags)


def _run_exposure(args: argparse.Namespace, settings: Settings) -> int:
    venue = _venue_from_args(args)
    profile = resolve_exposure(venue, default=settings.default_exposure)
    print(f"Exposure: {profile.category.value} ({profile.label})")
    print(f"  exposure={profile.exposure:.2f} shelter={profile.shelter_factor:.2f}")
    return 0


def _run_now(args: argparse.Namespace, settings: Settings) -> int:
    venue = _venue_from_args(args)
    profile = resolve_exposure(venue, default=settings.default_exposure)
    feels_like = apparent_temperature(
        args.temp,
        args.wind,
        args.humidity,
        profile.shelter_factor,
        default_humidity=settings.default_humidity_percent,
    )
    comfort = classify_comfort(feels_like)
    wind = classify_wind(args.wind, profile)

    print(f"Venue: {venue.display_name()} [{profile.category.value}]")
    print(f"Feels like: {feels_like}°C - {comfort.label} ({comfort.advice})")
    print(f"Wind: {wind.effective_wind_kmh}km/h - {wind.label} ({wind.advice})")
    explanation = wind_impact_explanation(args.temp, args.wind, feels_like, profile)
    if explanation:
        print(explanation)

    if args.uv is not None:
        advice = sun_protection_advice(venue, args.uv)
        print(f"{advice.label}: {advice.detail}")
        print(f"Sun: {best_sun_safe_times(venue, args.uv, current_hour=args.hour)}")

    sample = WeatherSample(
        temperature_c=args.temp,
        wind_speed_ms=args.wind,
        humidity_percent=args.humidity,
        condition=args.condition,
        uv_index=args.uv,
    )
    suggestion = rain_suggestion(venue, sample, rain_arrival_minutes=args.rain_in)
    if suggestion:
        print(f"Rain: {suggestion}")
    return 0


def _run_forecast(args: argparse.Namespace, settings: Settings) -> int:
    venue = _venue_from_args(args)
    profile = resolve_exposure(venue, default=settings.default_exposure)
    series = generate_hourly_forecast(
        args.temp,
        args.wind,
        args.humidity,
        venue,
        current_hour=args.hour,
        profile=profile,
        default_humidity=settings.default_humidity_percent,
    )

    print(f"{'Hour':>5} {'Temp':>5} {'Feels':>6} {'Wind':>8}  Comfort / Wind")
    for point in series:
        print(
            f"{point.label:>5} {point.temperature:>4}° {point.feels_like:>5}° "
            f"{point.wind_kmh:>4}km/h  {point.comfort_tier.value} / {point.wind_tier.value}"
        )

    trend = wind_trend(series)
    print(f"Trend: {trend.label}")

    window = optimal_booking_window(series, window_size=settings.booking_window_hours)
    if window:
        print(f"Best window: {window.label} - {window.reason}")
    return 0


COMMANDS = {
    "exposure": _run_exposure,
    "now": _run_now,
    "forecast": _run_forecast,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    level = "DEBUG" if args.verbose else settings.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command '{args.command}'")
    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
