"""Input adapters that normalize raw athlete exports."""

from .athletes import (
    DEFAULT_COLUMN_MAPPING,
    AthleteRowError,
    LoadReport,
    load_athlete_csv,
    resolve_mapping,
    rows_to_records,
)

__all__ = [
    "DEFAULT_COLUMN_MAPPING",
    "AthleteRowError",
    "LoadReport",
    "load_athlete_csv",
    "resolve_mapping",
    "rows_to_records",
]
