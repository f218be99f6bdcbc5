"""Exposure rules for resolving a venue's wind exposure profile.

A venue's free-text vibe, tags and name are matched against an ordered
table of keyword rules. The first matching rule wins. Order matters
because the categories overlap in raw text: a "Rooftop Beer Garden" is a
rooftop, not a beer garden, so rooftop is checked first.

Example:
    ```python
    venue = VenueDescriptor(id="dv-02", vibe="Rooftop Courtyard", tags=("Cozy",))
    profile = resolve_exposure(venue)
    profile.category  # ExposureCategory.ROOFTOP
    profile.exposure  # 0.95
    ```
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from venue_comfort.models.comfort import ExposureCategory, ExposureProfile
from venue_comfort.models.venue import VenueDescriptor

logger = logging.getLogger(__name__)


# (exposure, shelter_factor, label) per category
EXPOSURE_TABLE: dict[ExposureCategory, tuple[float, float, str]] = {
    ExposureCategory.ROOFTOP: (0.95, 0.05, "Rooftop - Fully Exposed"),
    ExposureCategory.FLOATING: (0.90, 0.10, "Waterfront - Very Exposed"),
    ExposureCategory.WATERFRONT: (0.80, 0.20, "Waterfront - High Exposure"),
    ExposureCategory.OPEN_PARK: (0.75, 0.25, "Open Park/Stadium - High Exposure"),
    ExposureCategory.BEER_GARDEN: (0.55, 0.45, "Beer Garden - Moderate Exposure"),
    ExposureCategory.COURTYARD: (0.35, 0.65, "Courtyard - Partially Sheltered"),
    ExposureCategory.STREETSIDE: (0.50, 0.50, "Streetside - Moderate Exposure"),
    ExposureCategory.INDOOR: (0.05, 0.95, "Indoor - Well Sheltered"),
    ExposureCategory.CAFE: (0.30, 0.70, "Cafe - Mostly Sheltered"),
    ExposureCategory.HOTEL: (0.25, 0.75, "Hotel - Sheltered"),
}


class ExposureRule(BaseModel):
    """A keyword rule mapping venue text to an exposure category."""

    model_config = ConfigDict(frozen=True)

    category: ExposureCategory = Field(..., description="Category assigned on match")
    keywords: tuple[str, ...] = Field(..., description="Lower-case substrings to look for")

    def matches(self, text: str) -> bool:
        """Check if any keyword occurs in the (lower-cased) venue text."""
        return any(keyword in text for keyword in self.keywords)


def _rule(category: ExposureCategory, *keywords: str) -> ExposureRule:
    return ExposureRule(category=category, keywords=keywords)


# Most exposed / most specific first
EXPOSURE_RULES: tuple[ExposureRule, ...] = (
    _rule(ExposureCategory.ROOFTOP, "rooftop"),
    _rule(ExposureCategory.FLOATING, "floating"),
    _rule(ExposureCategory.WATERFRONT, "river", "waterfront", "wharf"),
    _rule(ExposureCategory.OPEN_PARK, "stadium", "pop-up", "marquee"),
    _rule(ExposureCategory.OPEN_PARK, "food truck", "park"),
    _rule(ExposureCategory.BEER_GARDEN, "beer garden", "garden"),
    _rule(ExposureCategory.COURTYARD, "courtyard", "maze", "hidden"),
    _rule(ExposureCategory.STREETSIDE, "streetside", "street"),
    _rule(ExposureCategory.CAFE, "cafe", "bookshop", "co-work"),
    _rule(ExposureCategory.HOTEL, "hotel", "boutique hotel"),
    _rule(ExposureCategory.COURTYARD, "lounge", "cocktail", "cozy"),
    _rule(ExposureCategory.BEER_GARDEN, "pub", "tavern"),
    _rule(ExposureCategory.BEER_GARDEN, "warehouse"),
)


def match_category(
    text: str,
    rules: tuple[ExposureRule, ...] = EXPOSURE_RULES,
    default: ExposureCategory = ExposureCategory.BEER_GARDEN,
) -> ExposureCategory:
    """Return the category of the first rule matching ``text``.

    Args:
        text: Venue text (matched case-insensitively)
        rules: Ordered rule table
        default: Category used when no rule matches

    Returns:
        The matched ExposureCategory, or ``default``
    """
    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.category
    return default


def detect_exposure(
    venue: VenueDescriptor,
    default: ExposureCategory = ExposureCategory.BEER_GARDEN,
) -> ExposureCategory:
    """Detect the exposure category for a venue from its vibe, tags and name."""
    return match_category(venue.search_text(), default=default)


def profile_for(category: ExposureCategory, venue_note: str | None = None) -> ExposureProfile:
    """Build the fixed exposure profile for a category."""
    exposure, shelter_factor, label = EXPOSURE_TABLE[category]
    return ExposureProfile(
        category=category,
        exposure=exposure,
        shelter_factor=shelter_factor,
        label=label,
        venue_note=venue_note,
    )


def resolve_exposure(
    venue: VenueDescriptor,
    default: ExposureCategory = ExposureCategory.BEER_GARDEN,
) -> ExposureProfile:
    """Resolve the full wind exposure profile for a venue.

    Resolution always succeeds: venues matching no rule fall back to
    ``default``.

    Args:
        venue: Venue to resolve
        default: Category used when no keyword rule matches

    Returns:
        ExposureProfile with exposure/shelter coefficients and the
        venue's wind note
    """
    category = detect_exposure(venue, default=default)
    logger.debug(f"Venue {venue.id} resolved to exposure '{category.value}'")
    return profile_for(category, venue_note=venue.wind_note)
