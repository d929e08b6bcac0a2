"""Canonical athlete model shared across ingestion, scoring and reporting."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


TECHNICAL_ATTRIBUTES = (
    "finishing",
    "first_touch",
    "passing",
    "technique",
    "dribbling",
    "tackling",
)
MENTAL_ATTRIBUTES = ("decisions", "anticipation", "composure", "vision", "work_rate")
PHYSICAL_ATTRIBUTES = ("acceleration", "pace", "stamina", "strength", "jumping")
ATTRIBUTE_FIELDS = TECHNICAL_ATTRIBUTES + MENTAL_ATTRIBUTES + PHYSICAL_ATTRIBUTES


class AthleteRecord(BaseModel):
    """One athlete row as parsed from the scouting export.

    Attribute ratings are kept as plain integers; range checks are a data
    quality concern of the export, not of this model.
    """

    name: str
    club: str
    nationality: str
    position: str
    age: int = Field(..., ge=0)
    market_value: float = Field(..., ge=0.0)
    wage: float = Field(..., ge=0.0)
    current_ability: int
    potential_ability: int

    # Technical
    finishing: int
    first_touch: int
    passing: int
    technique: int
    dribbling: int
    tackling: int
    # Mental
    decisions: int
    anticipation: int
    composure: int
    vision: int
    work_rate: int
    # Physical
    acceleration: int
    pace: int
    stamina: int
    strength: int
    jumping: int

    model_config = ConfigDict(frozen=True)
