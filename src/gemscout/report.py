"""Plain-text rendering of scouting shortlists."""

from __future__ import annotations

from typing import List

from gemscout.config import attribute_label, get_profile
from gemscout.pool import RankedAthlete, Shortlist


RULE = "=" * 50


def format_currency_millions(value: float) -> str:
    return f"€{value / 1_000_000:.2f}M"


def format_wage_thousands(wage: float) -> str:
    return f"€{wage / 1_000:.2f}K/week"


def render_athlete(entry: RankedAthlete, position: str) -> str:
    """Render one shortlisted athlete with the attributes relevant to ``position``."""

    record = entry.record
    lines: List[str] = [
        "",
        RULE,
        record.name,
        RULE,
        f"Club: {record.club}",
        f"Age: {record.age}",
        f"Value: {format_currency_millions(record.market_value)}",
        f"Wage: {format_wage_thousands(record.wage)}",
        f"Current Ability: {record.current_ability}",
        f"Potential Ability: {record.potential_ability}",
        "",
        "Key Attributes:",
    ]
    for attribute in get_profile(position).key_attributes:
        lines.append(f"{attribute_label(attribute)}: {getattr(record, attribute)}")
    lines.append("")
    lines.append(f"Overall Score: {entry.score:.2f}")
    return "\n".join(lines)


def render_shortlist(shortlist: Shortlist, position: str) -> str:
    lines: List[str] = [f"Found {shortlist.summary.survivors} potential signings:"]
    for entry in shortlist.athletes:
        lines.append("")
        lines.append(f"{entry.rank}. Recommendation")
        lines.append(render_athlete(entry, position))
    return "\n".join(lines)


__all__ = [
    "format_currency_millions",
    "format_wage_thousands",
    "render_athlete",
    "render_shortlist",
]
