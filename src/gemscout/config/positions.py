"""Position weight profiles used by the scoring engine and the report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class WeightProfile:
    code: str
    weights: Tuple[Tuple[str, float], ...]
    key_attributes: Tuple[str, ...]

    @property
    def total_weight(self) -> float:
        return sum(weight for _, weight in self.weights)


DEFAULT_PROFILE = WeightProfile(
    code="DEFAULT",
    weights=(
        ("technique", 1.0),
        ("decisions", 1.0),
        ("stamina", 1.0),
        ("strength", 1.0),
        ("work_rate", 1.0),
    ),
    key_attributes=("technique", "decisions", "work_rate", "stamina"),
)

_PROFILES: Dict[str, WeightProfile] = {
    "ST": WeightProfile(
        code="ST",
        weights=(
            ("finishing", 2.0),
            ("first_touch", 1.5),
            ("acceleration", 1.5),
            ("pace", 1.5),
            ("composure", 1.0),
        ),
        key_attributes=("finishing", "first_touch", "acceleration", "pace", "composure"),
    ),
    "CM": WeightProfile(
        code="CM",
        weights=(
            ("passing", 2.0),
            ("vision", 1.5),
            ("decisions", 1.5),
            ("stamina", 1.0),
            ("work_rate", 1.5),
        ),
        key_attributes=("passing", "vision", "decisions", "stamina", "work_rate"),
    ),
    "CB": WeightProfile(
        code="CB",
        weights=(
            ("tackling", 2.0),
            ("strength", 1.5),
            ("jumping", 1.5),
            ("anticipation", 1.5),
            ("decisions", 1.0),
        ),
        key_attributes=("tackling", "strength", "jumping", "anticipation", "decisions"),
    ),
}


def iter_profiles() -> Iterable[WeightProfile]:
    """Return an iterator over the position-specific profiles."""

    return _PROFILES.values()


def get_profile(position: str) -> WeightProfile:
    """Fetch the profile for a position code, falling back to the generalist one."""

    return _PROFILES.get(position.upper(), DEFAULT_PROFILE)


def attribute_label(attribute: str) -> str:
    return attribute.replace("_", " ").title()
