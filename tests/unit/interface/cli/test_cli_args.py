from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Unset options map to None so config file values survive the merge.
3. The in-process CLI entry point and its exit codes.
"""

import json
from pathlib import Path

import pytest

from leafpaths.interface.cli.app import _merge_config, main
from leafpaths.interface.cli.args import args_to_overrides, build_parser

pytestmark = pytest.mark.usefixtures("reset_logging")


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return build_parser().parse_args(arg_list)


def test_cli_flags_mapping() -> None:
    args = parse_args([
        "-i", "records.csv",
        "--strategy", "iterative",
        "--sort",
        "--no-cycle-check",
        "--quiet",
        "-o", "out.txt",
        "--timeout", "3",
    ])

    overrides = args_to_overrides(args)

    assert overrides["source"] == "records.csv"
    assert overrides["strategy"] == "iterative"
    assert overrides["sort_output"] is True
    assert overrides["detect_cycles"] is False
    assert overrides["print_paths"] is False
    assert overrides["output_path"] == "out.txt"
    assert overrides["request_timeout"] == 3


def test_cli_defaults_are_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["source"] is None
    assert overrides["root_id"] is None
    assert "sort_output" not in overrides


def test_cli_rejects_unknown_strategy() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--strategy", "bfs"])


def test_merge_config_skips_none_values() -> None:
    merged = _merge_config({"source": "a.csv", "root_id": 0}, {"source": None, "root_id": 4})
    assert merged == {"source": "a.csv", "root_id": 4}


def test_main_prints_paths(records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-i", str(records_file), "--sort"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == ["/a/b/d", "/a/c"]


def test_main_json_output(records_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-i", str(records_file), "--json", "--strategy", "iterative"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert sorted(payload["paths"]) == ["/a/b/d", "/a/c"]


def test_main_without_source_returns_2(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 2
    assert "no record source" in capsys.readouterr().err


def test_main_reports_processing_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.csv"
    bad.write_text("x,a,0\n", encoding="utf-8")

    assert main(["-i", str(bad)]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_main_uses_config_file(records_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"source": str(records_file), "root_id": 1, "sort_output": True}), encoding="utf-8")

    assert main(["--config", str(cfg)]) == 0
    assert capsys.readouterr().out.splitlines() == ["/b/d", "/c"]


def test_main_dump_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--dump-config", "--root-id", "3"]) == 0
    assert json.loads(capsys.readouterr().out)["root_id"] == 3
