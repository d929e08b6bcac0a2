"""Position-weighted suitability scoring for athlete records."""

from __future__ import annotations

from dataclasses import dataclass

from gemscout.config import get_profile
from gemscout.models import AthleteRecord


ATTRIBUTE_WEIGHT = 0.4
POTENTIAL_WEIGHT = 0.4
VALUE_WEIGHT = 0.2

# Fixed denominator carried over from the scoring policy; ratings on a 1-20
# scale never get close to 1.0 here.
POTENTIAL_SCALE = 200.0
VALUE_CAP = 50_000_000.0


@dataclass(frozen=True)
class ScoreBreakdown:
    """Components of a suitability score for one athlete and position."""

    profile: str
    attribute_score: float
    potential_score: float
    value_score: float
    total: float


def attribute_score(record: AthleteRecord, position: str) -> float:
    """Weighted mean of the ratings selected by the position's profile."""

    profile = get_profile(position)
    weighted = sum(getattr(record, attribute) * weight for attribute, weight in profile.weights)
    return weighted / profile.total_weight


def potential_score(record: AthleteRecord) -> float:
    return record.potential_ability / POTENTIAL_SCALE


def value_score(record: AthleteRecord) -> float:
    """Cheaper athletes score higher; anything at or above the cap scores 0."""

    return 1.0 - (min(record.market_value, VALUE_CAP) / VALUE_CAP)


def score_breakdown(record: AthleteRecord, position: str) -> ScoreBreakdown:
    attributes = attribute_score(record, position)
    potential = potential_score(record)
    value = value_score(record)
    total = (
        (attributes * ATTRIBUTE_WEIGHT)
        + (potential * POTENTIAL_WEIGHT)
        + (value * VALUE_WEIGHT)
    )
    return ScoreBreakdown(
        profile=get_profile(position).code,
        attribute_score=attributes,
        potential_score=potential,
        value_score=value,
        total=total,
    )


def score(record: AthleteRecord, position: str) -> float:
    """Overall suitability of ``record`` for ``position`` (higher is better)."""

    return score_breakdown(record, position).total
