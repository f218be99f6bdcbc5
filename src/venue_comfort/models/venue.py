"""Venue models for comfort and wind exposure analysis."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude).

    Carried on a venue for identity only. The comfort engine never
    uses position in its calculations.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class VenueDescriptor(BaseModel):
    """Static venue metadata supplied by the venue catalog.

    Only ``vibe``, ``tags`` and ``name`` feed the exposure resolver.
    Instances are frozen so the same descriptor always resolves to the
    same exposure profile.
    """

    model_config = ConfigDict(frozen=True)

    id: str | int = Field(..., description="Opaque venue identifier")
    name: str | None = Field(default=None, description="Venue display name")
    vibe: str = Field(default="", description="Free-text vibe, e.g. 'Rooftop Courtyard'")
    tags: tuple[str, ...] = Field(
        default=(), description="Ordered descriptive tags, e.g. ('Rooftop', 'Cozy')"
    )
    coordinates: Coordinates | None = Field(
        default=None, description="Venue position (identity only)"
    )
    wind_note: str | None = Field(
        default=None, description="Local wind character note, e.g. 'Gets afternoon bay breezes'"
    )

    @field_validator("vibe", mode="before")
    @classmethod
    def none_vibe_to_empty(cls, v: str | None) -> str:
        """Treat a missing vibe as empty text."""
        return v or ""

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v):
        """Accept any iterable of tags (lists from JSON included)."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return tuple(v)

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag lookup."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def has_any_tag(self, tags: list[str] | tuple[str, ...]) -> bool:
        """Check whether any of the given tags is present."""
        return any(self.has_tag(t) for t in tags)

    def search_text(self) -> str:
        """Lower-cased concatenation of vibe, tags and name."""
        parts = [self.vibe, *self.tags, self.name or ""]
        return " ".join(p for p in parts if p).lower()

    def display_name(self) -> str:
        """Get a display name for this venue."""
        if self.name:
            return self.name
        return f"Venue {self.id}"
