"""
Tests for the command-line entry point.
"""

import json

import pandas as pd

from app.cli import main


BASE_ARGS = [
    "--start-month", "2025-11",
    "--direct-left", "10",
    "--direct-right", "0",
    "--months", "4",
    "--referral-rate", "50",
    "--referrals-per-person", "3",
    "--point-multiplier", "1.5",
    "--mobilization-rate", "15",
]


class TestMain:

    def test_prints_table_and_summary(self, capsys):
        assert main(BASE_ARGS) == 0
        out = capsys.readouterr().out
        assert out.startswith("Simulation results")
        assert "2026/02/20" in out
        assert "cumulative_commission: 45000" in out

    def test_details(self, capsys):
        assert main(BASE_ARGS + ["--details"]) == 0
        out = capsys.readouterr().out
        assert "[left]" in out
        assert "[right]" in out

    def test_export(self, tmp_path):
        target = tmp_path / "out.csv"
        assert main(BASE_ARGS + ["--export", str(target)]) == 0
        assert len(pd.read_csv(target)) == 4

    def test_inputs_file(self, tmp_path, capsys):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({
            "startMonth": "2025-04", "startLeftPt": 0, "startRightPt": 0,
            "directLeft": 2, "directRight": 0, "simulationMonths": 1, "name": "Sato",
            "referralRate": 50, "referralsPerPerson": 3, "pointMultiplier": 1.5, "mobilizationRate": 15,
        }), encoding="utf-8")
        assert main(["--inputs", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Simulation results for Sato" in out
        assert "2025/04/20" in out

    def test_bad_number_exit_code(self):
        assert main(BASE_ARGS + ["--months", "abc"]) == 2

    def test_negative_referrals_exit_code(self):
        assert main(BASE_ARGS + ["--direct-left", "-3"]) == 2

    def test_missing_inputs_file(self, tmp_path):
        assert main(["--inputs", str(tmp_path / "nope.json")]) == 2

    def test_bad_export_suffix(self, tmp_path):
        assert main(BASE_ARGS + ["--export", str(tmp_path / "out.json")]) == 2
