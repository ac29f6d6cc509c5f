"""Pydantic models for fixture schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
The nesting mirrors the rendered schedule: Location -> Day -> Fixture.
"""

from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field


class ValidatedRecord(BaseModel):
    """One CSV row that has all five required fields present and non-empty.

    Date and time are still raw text here; parsing them is left to the
    temporal normalizer so that format errors surface as fatal errors.
    """

    model_config = ConfigDict(frozen=True)

    venue: str  # Ground name, e.g. "Park A"
    competition: str  # Verbatim, e.g. "League"
    date_text: str  # "DD/MM/YYYY"
    time_text: str  # "H:MM:SS AM"
    opponent: str  # Verbatim, e.g. "North Brisbane"
    line: int | None = None  # 1-based CSV line, for diagnostics


class Fixture(BaseModel):
    """A single scheduled match at a venue on a given day."""

    model_config = ConfigDict(populate_by_name=True)

    display_time: str  # "2:30 PM"
    competition: str
    opponent: str
    sort_time: time  # Ordering only, never displayed
    class_: str = Field(alias="class")  # Grouping key, e.g. "north_brisbane"


class Day(BaseModel):
    """All fixtures at one venue on one calendar date, ordered by kick-off time."""

    display_date: str  # "Saturday 12 April"
    fixtures: list[Fixture] = Field(default_factory=list)
    sort_date: date  # Ordering only, never displayed


class Location(BaseModel):
    """A venue and its fixture days, ordered by date."""

    location: str
    days: list[Day] = Field(default_factory=list)
