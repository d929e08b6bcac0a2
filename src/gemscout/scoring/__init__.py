"""Suitability scoring."""

from .engine import (
    ATTRIBUTE_WEIGHT,
    POTENTIAL_SCALE,
    POTENTIAL_WEIGHT,
    VALUE_CAP,
    VALUE_WEIGHT,
    ScoreBreakdown,
    attribute_score,
    potential_score,
    score,
    score_breakdown,
    value_score,
)

__all__ = [
    "ATTRIBUTE_WEIGHT",
    "POTENTIAL_SCALE",
    "POTENTIAL_WEIGHT",
    "VALUE_CAP",
    "VALUE_WEIGHT",
    "ScoreBreakdown",
    "attribute_score",
    "potential_score",
    "score",
    "score_breakdown",
    "value_score",
]
