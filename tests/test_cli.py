from pathlib import Path

import pytest

from gemscout.cli import main

from tests.factories import athlete_row, write_athlete_csv


@pytest.fixture
def athletes_csv(tmp_path: Path) -> Path:
    return write_athlete_csv(
        tmp_path / "athletes.csv",
        [
            athlete_row(name="Record A", finishing=18, first_touch=16, acceleration=17, pace=18, composure=14),
            athlete_row(name="Record B", age=25, market_value=1_000_000, potential_ability=160),
            athlete_row(name="Backup Nine", position="AM, ST", finishing=12),
            athlete_row(name="Broken Row", age="unknown"),
        ],
    )


def test_cli_prints_ranked_shortlist(athletes_csv: Path, capsys):
    exit_code = main(["--file", str(athletes_csv), "--position", "ST", "--workers", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Found 2 potential signings:" in out
    assert out.index("Record A") < out.index("Backup Nine")
    assert "Record B" not in out
    assert "Broken Row" not in out


def test_cli_limit_truncates_display(athletes_csv: Path, capsys):
    assert main(["-f", str(athletes_csv), "-p", "st", "--limit", "1", "--workers", "1"]) == 0

    out = capsys.readouterr().out
    assert "Found 2 potential signings:" in out
    assert "2. Recommendation" not in out


def test_cli_empty_result_is_success(athletes_csv: Path, capsys):
    assert main(["-f", str(athletes_csv), "-p", "GK", "--workers", "1"]) == 0
    assert "Found 0 potential signings:" in capsys.readouterr().out


def test_cli_missing_file_exits_nonzero(tmp_path: Path, capsys):
    assert main(["-f", str(tmp_path / "missing.csv"), "-p", "ST"]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_strict_mode_reports_bad_row(athletes_csv: Path, capsys):
    assert main(["-f", str(athletes_csv), "-p", "ST", "--strict"]) == 1
    assert "row 4" in capsys.readouterr().err


def test_cli_bad_mapping_entry_exits_nonzero(athletes_csv: Path, capsys):
    assert main(["-f", str(athletes_csv), "-p", "ST", "--column", "nonsense"]) == 1
    assert "key=value" in capsys.readouterr().err


@pytest.mark.parametrize(
    "extra",
    [
        ["--max-age", "-1"],
        ["--max-value", "cheap"],
        ["--min-potential", "1.5"],
        ["--position", "  "],
    ],
)
def test_cli_rejects_invalid_arguments(athletes_csv: Path, extra):
    argv = ["-f", str(athletes_csv), "-p", "ST", *extra]
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_cli_saves_and_loads_mapping_profile(tmp_path: Path, capsys):
    row = athlete_row(name="Renamed Value")
    row["Value EUR"] = row.pop("value")
    path = write_athlete_csv(tmp_path / "renamed.csv", [row], header=list(row.keys()))
    profile = tmp_path / "profile.json"

    assert main(["-f", str(path), "-p", "ST", "--column", "market_value=Value EUR", "--save-profile", str(profile)]) == 0
    assert profile.exists()
    capsys.readouterr()

    assert main(["-f", str(path), "-p", "ST", "--load-profile", str(profile)]) == 0
    assert "Renamed Value" in capsys.readouterr().out
