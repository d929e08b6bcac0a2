"""Command-line interface for shortlisting athletes from a CSV export."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from gemscout.config_loader import MappingProfile
from gemscout.ingest import AthleteRowError, load_athlete_csv
from gemscout.pool import ProgressCounter, ScoutCriteria, build_shortlist
from gemscout.report import RULE, render_shortlist


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _non_negative_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{raw}'") from None
    if not value >= 0.0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {raw}")
    return value


def _position(raw: str) -> str:
    value = raw.strip()
    if not value:
        raise argparse.ArgumentTypeError("position must not be empty")
    return value


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find undervalued athletes for a position")
    parser.add_argument("-f", "--file", type=Path, required=True, help="Path to athletes CSV")
    parser.add_argument("--max-age", type=_non_negative_int, default=23, help="Maximum age (inclusive)")
    parser.add_argument(
        "--max-value",
        type=_non_negative_float,
        default=5.0,
        help="Maximum market value in millions (inclusive)",
    )
    parser.add_argument(
        "--min-potential",
        type=_non_negative_int,
        default=130,
        help="Minimum potential ability (inclusive)",
    )
    parser.add_argument(
        "-p",
        "--position",
        type=_position,
        required=True,
        help="Target position code (e.g., ST, CM, CB); matched as a substring",
    )
    parser.add_argument("--limit", type=_positive_int, default=10, help="Number of athletes to display")
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Worker processes for filtering (defaults to GEMSCOUT_WORKERS or 1)",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for CSV columns (e.g., market_value=Value, name=First|Last)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first unparseable row instead of skipping it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("\nGemscout - Hidden Gems Finder")
    print(RULE)
    print("Loading and analyzing athlete data...")

    try:
        column_mapping = _parse_mapping(args.column)
        if args.load_profile:
            profile = MappingProfile.load(args.load_profile)
            column_mapping = profile.column_mapping | column_mapping
        records, _ = load_athlete_csv(args.file, mapping=column_mapping or None, strict=args.strict)
        if args.save_profile:
            MappingProfile(column_mapping).save(args.save_profile)
            print(f"Saved mapping profile to {args.save_profile}")
    except AthleteRowError as exc:
        print(f"error: {args.file}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc.filename or args.file}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    criteria = ScoutCriteria(
        max_age=args.max_age,
        max_value_millions=args.max_value,
        min_potential=args.min_potential,
        target_position=args.position,
    )
    shortlist = build_shortlist(
        records,
        criteria,
        limit=args.limit,
        workers=args.workers,
        progress=ProgressCounter(len(records)),
    )

    print()
    print(render_shortlist(shortlist, args.position))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
