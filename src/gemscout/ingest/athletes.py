"""Helpers to load athlete CSV exports and emit canonical records."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from gemscout.models import AthleteRecord


logger = logging.getLogger(__name__)

DEFAULT_COLUMN_MAPPING: Dict[str, str] = {
    field: ("value" if field == "market_value" else field) for field in AthleteRecord.model_fields
}


class AthleteRowError(ValueError):
    """Raised in strict mode when a row cannot be turned into an athlete."""

    def __init__(self, row_number: int, message: str):
        super().__init__(f"row {row_number}: {message}")
        self.row_number = row_number
        self.message = message


@dataclass(frozen=True)
class LoadReport:
    total_rows: int
    loaded: int
    skipped_rows: Tuple[int, ...] = ()

    @property
    def skipped(self) -> int:
        return len(self.skipped_rows)


def resolve_mapping(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Merge user column overrides on top of the default header mapping."""

    mapping = dict(DEFAULT_COLUMN_MAPPING)
    for field, column in (overrides or {}).items():
        if field not in DEFAULT_COLUMN_MAPPING:
            raise ValueError(f"Unknown athlete field '{field}' in column mapping")
        mapping[field] = column
    return mapping


def _parse_spec(spec: str) -> str | Tuple[str, ...]:
    if "|" in spec:
        return tuple(part.strip() for part in spec.split("|"))
    return spec


def _extract(row: Mapping[str, Optional[str]], spec: str | Sequence[str]) -> Optional[str]:
    if isinstance(spec, str):
        value = row.get(spec)
        return value.strip() if value is not None else None
    parts = [(row.get(col) or "").strip() for col in spec if row.get(col)]
    return " ".join(parts) if parts else None


def _required_columns(mapping: Mapping[str, str]) -> List[str]:
    columns: List[str] = []
    for spec in mapping.values():
        parsed = _parse_spec(spec)
        columns.extend([parsed] if isinstance(parsed, str) else parsed)
    return columns


def _describe(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid value')}"


def rows_to_records(
    rows: Sequence[Mapping[str, Optional[str]]],
    *,
    mapping: Mapping[str, str] | None = None,
    strict: bool = False,
) -> Tuple[List[AthleteRecord], LoadReport]:
    """Validate raw CSV rows into athletes.

    Rows that fail validation are dropped (and listed in the report) unless
    ``strict`` is set, in which case the first failure raises
    :class:`AthleteRowError`. Row numbers count data rows from 1.
    """

    resolved = resolve_mapping(mapping)
    specs = {field: _parse_spec(column) for field, column in resolved.items()}
    records: List[AthleteRecord] = []
    skipped: List[int] = []

    for row_number, row in enumerate(rows, start=1):
        payload = {field: _extract(row, spec) for field, spec in specs.items()}
        try:
            records.append(AthleteRecord.model_validate(payload))
        except ValidationError as exc:
            if strict:
                raise AthleteRowError(row_number, _describe(exc)) from None
            logger.debug("Skipping row %s: %s", row_number, _describe(exc))
            skipped.append(row_number)

    report = LoadReport(total_rows=len(rows), loaded=len(records), skipped_rows=tuple(skipped))
    return records, report


def load_athlete_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
    strict: bool = False,
) -> Tuple[List[AthleteRecord], LoadReport]:
    resolved = resolve_mapping(mapping)
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        header = set(reader.fieldnames or [])
        missing = [column for column in _required_columns(resolved) if column not in header]
        if missing:
            logger.warning(
                "%s is missing columns %s; rows cannot be loaded without them",
                path,
                ", ".join(missing),
            )
        rows = list(reader)

    records, report = rows_to_records(rows, mapping=resolved, strict=strict)
    logger.info(
        "Loaded %s/%s athletes from %s (%s skipped)",
        report.loaded,
        report.total_rows,
        path,
        report.skipped,
    )
    return records, report
