"""Keyword rules for resolving venue wind exposure."""

from venue_comfort.rules.exposure import (
    EXPOSURE_RULES,
    EXPOSURE_TABLE,
    ExposureRule,
    detect_exposure,
    match_category,
    profile_for,
    resolve_exposure,
)

__all__ = [
    "EXPOSURE_RULES",
    "EXPOSURE_TABLE",
    "ExposureRule",
    "detect_exposure",
    "match_category",
    "profile_for",
    "resolve_exposure",
]
