"""Domain models."""

from .athlete import (
    ATTRIBUTE_FIELDS,
    MENTAL_ATTRIBUTES,
    PHYSICAL_ATTRIBUTES,
    TECHNICAL_ATTRIBUTES,
    AthleteRecord,
)

__all__ = [
    "ATTRIBUTE_FIELDS",
    "AthleteRecord",
    "MENTAL_ATTRIBUTES",
    "PHYSICAL_ATTRIBUTES",
    "TECHNICAL_ATTRIBUTES",
]
