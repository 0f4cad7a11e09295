"""Tests for the command-line salary report."""

from pathlib import Path

import pytest

from scripts.salary_report import main


pytestmark = pytest.mark.fast

EXAMPLE_ROSTER = str(Path(__file__).resolve().parent.parent / "data" / "roster.example.json")


def test_report_for_roster_file(capsys):
    assert main(["--roster", EXAMPLE_ROSTER, "--date", "2025-01-01"]) == 0
    out = capsys.readouterr().out
    assert "STAFF SALARIES AS OF 2025-01-01" in out
    assert "1060.38" in out
    assert "4521.38" in out


def test_missing_roster_file(tmp_path, capsys):
    assert main(["--roster", str(tmp_path / "nope.json")]) == 1
    assert "not found" in capsys.readouterr().out


def test_invalid_date(capsys):
    assert main(["--roster", EXAMPLE_ROSTER, "--date", "31/12/2025"]) == 1
    assert "Invalid date" in capsys.readouterr().out
