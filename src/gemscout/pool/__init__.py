"""Athlete pool utilities (filtering, ranking, progress)."""

from .filtering import (
    RankedAthlete,
    ScoutCriteria,
    Shortlist,
    ShortlistSummary,
    build_shortlist,
    filter_athletes,
    passes_criteria,
    rank_athletes,
)
from .progress import ProgressCounter

__all__ = [
    "ProgressCounter",
    "RankedAthlete",
    "ScoutCriteria",
    "Shortlist",
    "ShortlistSummary",
    "build_shortlist",
    "filter_athletes",
    "passes_criteria",
    "rank_athletes",
]
