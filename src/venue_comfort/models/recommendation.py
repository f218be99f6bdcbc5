"""Recommendation models derived from an hourly series."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from venue_comfort.models.comfort import ComfortTier, WindTier


class WindTrendDirection(str, Enum):
    """Direction the wind is heading over the next few hours."""

    BUILDING = "building"
    CALMING = "calming"
    STEADY = "steady"


class WindTrend(BaseModel):
    """Wind trend with display label."""

    direction: WindTrendDirection
    label: str


class BookingWindow(BaseModel):
    """The best contiguous block of hours for outdoor comfort."""

    start_hour: int = Field(..., ge=0, le=23, description="First hour of the window")
    end_hour: int = Field(..., ge=0, le=23, description="Hour the window ends (exclusive)")
    start_label: str = Field(..., description="e.g. '2pm'")
    end_label: str = Field(..., description="e.g. '5pm'")
    average_apparent_temperature: float | None = Field(
        default=None, description="Mean feels-like temperature across the window"
    )
    wind_tier: WindTier = Field(..., description="Wind tier of the first hour")
    reason: str = Field(..., description="Human-readable justification")
    score: float = Field(..., description="Summed hourly score of the window")

    @property
    def label(self) -> str:
        return f"{self.start_label} - {self.end_label}"


class ProviderWindow(BaseModel):
    """Best window found in raw provider hourly data."""

    start_hour: int = Field(..., ge=0, le=23)
    end_hour: int = Field(..., ge=0, le=23, description="Exclusive end hour")
    label: str = Field(..., description="e.g. '2pm - 5pm'")
    score: int = Field(..., ge=0, le=100, description="Average hourly comfort score")


class VenueReport(BaseModel):
    """Comparison entry for a single venue."""

    venue_id: str | int
    venue_name: str
    score: float
    wind_tier: WindTier
    wind_label: str
    apparent_temperature: float | None = None
    comfort_tier: ComfortTier


class VenueComparison(BaseModel):
    """Side-by-side comparison of venues under the same weather."""

    reports: list[VenueReport] = Field(default_factory=list)
    best_venue_id: str | int
    recommendation: str

    def get_report(self, venue_id: str | int) -> VenueReport | None:
        for report in self.reports:
            if report.venue_id == venue_id:
                return report
        return None
