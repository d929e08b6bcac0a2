from gemscout.pool import ScoutCriteria, build_shortlist
from gemscout.report import (
    format_currency_millions,
    format_wage_thousands,
    render_athlete,
    render_shortlist,
)

from tests.factories import make_athlete


def _shortlist(position: str):
    criteria = ScoutCriteria(max_age=23, max_value_millions=5.0, min_potential=130, target_position=position)
    records = [
        make_athlete(
            name="Record A",
            club="Leicester",
            position="ST",
            finishing=18,
            first_touch=16,
            acceleration=17,
            pace=18,
            composure=14,
        )
    ]
    return build_shortlist(records, criteria, limit=10, workers=1)


def test_currency_formatting():
    assert format_currency_millions(2_000_000) == "€2.00M"
    assert format_currency_millions(1_234_567) == "€1.23M"
    assert format_wage_thousands(15_000) == "€15.00K/week"


def test_render_athlete_shows_position_attributes():
    entry = _shortlist("ST").athletes[0]

    text = render_athlete(entry, "st")

    assert "Record A" in text
    assert "Club: Leicester" in text
    assert "Value: €2.00M" in text
    assert "Wage: €15.00K/week" in text
    assert "Potential Ability: 150" in text
    assert "First Touch: 16" in text
    assert "Composure: 14" in text
    assert "Tackling" not in text
    assert text.rstrip().endswith("Overall Score: 7.24")


def test_render_athlete_generalist_attributes():
    criteria = ScoutCriteria(max_age=23, max_value_millions=5.0, min_potential=130, target_position="AM")
    entry = build_shortlist([make_athlete(position="AM")], criteria, workers=1).athletes[0]

    lines = render_athlete(entry, "AM").splitlines()
    start = lines.index("Key Attributes:") + 1
    assert lines[start : start + 4] == ["Technique: 10", "Decisions: 10", "Work Rate: 10", "Stamina: 10"]


def test_render_shortlist_numbers_recommendations():
    text = render_shortlist(_shortlist("ST"), "ST")
    assert text.startswith("Found 1 potential signings:")
    assert "1. Recommendation" in text
