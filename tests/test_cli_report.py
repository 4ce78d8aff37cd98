# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the ``lintsummary report`` command."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from lintsummary.cli.app import app
from lintsummary.cli.report import ReportOptions, resolve_report
from lintsummary.config import Config
from lintsummary.core.models import ExecutionMode
from lintsummary.core.severity import Severity
from lintsummary.diagnostics import parse_payload

PAYLOAD = {
    "execution": {"mode": "check"},
    "diagnostic_level": "warning",
    "diagnostics": [
        {"file": "a.js", "category": "lint/noUnusedVariables", "severity": "error"},
        {"file": "a.js", "category": "format", "severity": "warning"},
        {"file": "b.js", "category": "lint/style/useConst", "severity": "information"},
    ],
    "summary": {"unchanged": 2, "errors": 1, "warnings": 1, "suggested_fixes_skipped": 3},
}


def _write_payload(tmp_path: Path, payload: dict[str, object] | None = None) -> Path:
    path = tmp_path / "run.json"
    path.write_text(json.dumps(payload or PAYLOAD), encoding="utf-8")
    return path


def test_report_renders_summary(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path), "--no-color"])

    assert result.exit_code == 0, result.output
    output = result.stdout
    assert "Summarised report of diagnostics by file." in output
    assert "▶ a.js" in output
    assert "▶ b.js" in output
    assert "The file isn't formatted." in output
    assert "noUnusedVariables" in output
    assert "useConst" not in output
    assert "Skipped 3 suggested fixes." in output
    assert "Checked 2 files in 0µs." in output
    assert "Found 1 error." in output
    assert "Found 1 warning." in output


def test_mode_option_overrides_payload(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path), "--mode", "format"])

    assert result.exit_code == 0, result.output
    assert "Rule Name" not in result.stdout
    assert "The file isn't formatted." in result.stdout
    assert "Skipped" not in result.stdout


def test_diagnostic_level_option_overrides_payload(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(
        app,
        ["report", str(path), "--root", str(tmp_path), "--diagnostic-level", "information"],
    )

    assert result.exit_code == 0, result.output
    assert "style/useConst" in result.stdout


def test_formats_by_file_flag(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path), "--formats-by-file"])

    assert result.exit_code == 0, result.output
    assert "Files that haven't been formatted yet" in result.stdout


def test_missing_payload_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["report", str(tmp_path / "missing.json"), "--root", str(tmp_path)])

    assert result.exit_code == 1
    assert "Unable to read" in result.stdout


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)
    (tmp_path / ".lintsummary.toml").write_text("[summary.layout]\nindent_width = -1\n", encoding="utf-8")

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.stdout


def test_version_option() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.startswith("lintsummary ")


def test_resolve_report_precedence(tmp_path: Path) -> None:
    document = parse_payload({"execution": {"mode": "ci"}, "verbose": False})
    config = Config.from_mapping({"output": {"verbose": True}, "summary": {"diagnostic_level": "error"}})

    resolved = resolve_report(ReportOptions(payload_path=tmp_path, root=tmp_path), config, document)

    assert resolved.execution.mode is ExecutionMode.CI
    assert resolved.payload.verbose is True
    assert resolved.payload.diagnostic_level is Severity.ERROR

    overridden = resolve_report(
        ReportOptions(payload_path=tmp_path, root=tmp_path, mode=ExecutionMode.LINT, verbose=False),
        config,
        document,
    )

    assert overridden.execution.mode is ExecutionMode.LINT
    assert overridden.payload.verbose is False


def test_diagnostic_level_accepts_aliases(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path), "--diagnostic-level", "info"])

    assert result.exit_code == 0, result.output
    assert "style/useConst" in result.stdout


def test_unknown_diagnostic_level_is_a_usage_error(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write_payload(tmp_path)

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path), "--diagnostic-level", "loud"])

    assert result.exit_code == 2
    assert "Summarised report" not in result.output


def test_undecodable_payload_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()
    path = tmp_path / "run.json"
    path.write_bytes(b'{"x": "\xff"}')

    result = runner.invoke(app, ["report", str(path), "--root", str(tmp_path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "is not valid UTF-8" in result.stdout


def test_failure_line_uses_default_presentation(tmp_path: Path) -> None:
    runner = CliRunner()
    missing = str(tmp_path / "missing.json")

    default = runner.invoke(app, ["report", missing, "--root", str(tmp_path)])
    plain = runner.invoke(app, ["report", missing, "--root", str(tmp_path), "--no-emoji"])

    assert default.exit_code == plain.exit_code == 1
    assert "❌ Unable to read" in default.stdout
    assert "❌" not in plain.stdout
