"""Configuration helpers for position weighting."""

from .positions import (
    DEFAULT_PROFILE,
    WeightProfile,
    attribute_label,
    get_profile,
    iter_profiles,
)

__all__ = [
    "DEFAULT_PROFILE",
    "WeightProfile",
    "attribute_label",
    "get_profile",
    "iter_profiles",
]
