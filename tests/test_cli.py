"""
Tests for the sgpa-planner command line.
"""

import json
from pathlib import Path

import pytest

from sgpa_planner.cli import EXIT_INVALID, EXIT_OK, build_parser, main


class TestCli:
    """End-to-end runs of main() with JSON files."""

    def test_sgpa_when_valid_file_then_prints_result(self, subjects_json, capsys):
        code = main(["sgpa", str(subjects_json)])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["sgpa"] == 7.3
        assert out["total_credits"] == 10

    def test_critical_when_cie_given_then_prints_tiers(self, capsys):
        code = main(["critical", "--cie", "40"])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out[0]["cutoff_total"] == 90
        assert out[0]["see_crit"] == 100

    def test_plan_single_when_valid_then_prints_plan(self, subjects_json, capsys):
        code = main(["plan-single", str(subjects_json), "--code", "SUB2", "--target", "7.6"])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["possible"] is True
        assert out["min_see_to_reach_target"] == 64

    def test_plan_global_when_valid_then_prints_plan(self, subjects_json, capsys):
        code = main(["plan-global", str(subjects_json), "--target", "7.5"])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["target_reached"] is True
        assert out["steps"][0]["code"] == "SUB2"

    def test_plan_single_when_unknown_code_then_exit_2(self, subjects_json, capsys):
        code = main(["plan-single", str(subjects_json), "--code", "NOPE", "--target", "8"])
        assert code == EXIT_INVALID
        assert capsys.readouterr().out == ""

    def test_sgpa_when_invalid_payload_then_exit_2(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"subjects": []}))
        assert main(["sgpa", str(path)]) == EXIT_INVALID

    def test_sgpa_when_missing_file_then_exit_2(self, tmp_path):
        assert main(["sgpa", str(tmp_path / "missing.json")]) == EXIT_INVALID

    def test_config_when_given_then_used(self, subjects_json, tmp_path, capsys):
        """A pass/fail table: every total >= 50 earns 10, else 0."""
        config_path = tmp_path / "grading.json"
        config_path.write_text(json.dumps({
            "cutoffs": [{"cutoff_total": 50, "grade_point": 10}],
            "floor_grade_point": 0,
        }))
        code = main(["--config", str(config_path), "sgpa", str(subjects_json)])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["sgpa"] == 10.0

    def test_config_when_after_command_then_used(self, subjects_json, tmp_path, capsys):
        config_path = tmp_path / "grading.json"
        config_path.write_text(json.dumps({
            "cutoffs": [{"cutoff_total": 50, "grade_point": 10}],
            "floor_grade_point": 0,
        }))
        code = main(["plan-global", str(subjects_json), "--target", "8.5", "--config", str(config_path)])
        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["initial_sgpa"] == 10.0
        assert out["target_reached"] is True

    def test_parser_when_options_before_command_then_kept(self):
        args = build_parser().parse_args(["--config", "g.json", "-v", "sgpa", "s.json"])
        assert args.config == Path("g.json")
        assert args.verbose is True

    def test_parser_when_no_options_then_defaults(self):
        args = build_parser().parse_args(["sgpa", "s.json"])
        assert args.config is None
        assert args.verbose is False

    def test_parser_when_no_command_then_errors(self):
        parser = build_parser()
        with pytest.raises(SystemExit) as exc:
            parser.parse_args([])
        assert exc.value.code == 2
