# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the per-file report and run summary rendering."""

from __future__ import annotations

from datetime import timedelta

from lintsummary.config.models import ReportLayout, SummaryConfig
from lintsummary.core.models import Execution, ExecutionMode, RunSummary
from lintsummary.core.severity import Severity
from lintsummary.reporting.output.markup import StyleRole
from lintsummary.reporting.summary import (
    FileToDiagnostics,
    FormatsByFile,
    RuleName,
    aggregate,
    render_file_report,
    render_formats_by_file,
    render_lints,
    render_run_summary,
)

LAYOUT = ReportLayout()


def _lints_for(*names: str) -> FileToDiagnostics:
    files = FileToDiagnostics()
    files.track_file("f.js")
    for name in names:
        files.insert_lint("f.js", RuleName(name))
    return files


def _table_rows(text: str) -> list[str]:
    lines = text.splitlines()
    header_index = next(index for index, line in enumerate(lines) if "Rule Name" in line)
    return [line for line in lines[header_index:] if line.strip()]


def test_empty_tally_renders_nothing() -> None:
    files = _lints_for()

    assert render_lints(files["f.js"].lints, LAYOUT).plain == ""


def test_rows_are_ordered_longest_name_first() -> None:
    files = _lints_for("abc", "abcdefg", "abcde")

    rows = _table_rows(render_lints(files["f.js"].lints, LAYOUT).plain)

    names = [row.split()[0] for row in rows[1:]]
    assert names == ["abcdefg", "abcde", "abc"]


def test_count_column_is_aligned() -> None:
    files = _lints_for("abc", "abcdefg", "abcdefg", "abcde")

    rows = _table_rows(render_lints(files["f.js"].lints, LAYOUT).plain)

    header, *body = rows
    offset = header.index("Diagnostics")
    assert offset == LAYOUT.indent_width + len("Rule Name") + len("abcdefg") + LAYOUT.padding
    for row in body:
        assert row[offset - 1] == " "
        assert row[offset].isdigit()
    assert [row[offset:] for row in body] == ["2", "1", "1"]


def test_alignment_follows_custom_layout() -> None:
    layout = ReportLayout(indent_width=2, padding=3)
    files = _lints_for("ab", "abcd")

    rows = _table_rows(render_lints(files["f.js"].lints, layout).plain)

    assert rows[0] == "  Rule Name" + " " * 7 + "Diagnostics"
    assert rows[1] == "  abcd" + " " * 12 + "1"
    assert rows[2] == "  ab" + " " * 14 + "1"


def test_table_styles_roles() -> None:
    files = _lints_for("rule")

    fragments = render_lints(files["f.js"].lints, LAYOUT).fragments

    styled = {fragment.text: fragment.roles for fragment in fragments if fragment.roles}
    assert styled["Rule Name"] == (StyleRole.INFO, StyleRole.UNDERLINE)
    assert styled["Diagnostics"] == (StyleRole.INFO, StyleRole.DIM)
    assert styled["rule"] == (StyleRole.EMPHASIS,)


def test_check_scenario_report(make_diagnostic) -> None:
    diagnostics = [
        make_diagnostic(file="a.js", category="lint/noUnusedVariables", severity=Severity.ERROR),
        make_diagnostic(file="a.js", category="format", severity=Severity.WARNING),
    ]
    files = aggregate(ExecutionMode.CHECK, Severity.WARNING, False, diagnostics)

    text = render_file_report(files, LAYOUT).plain

    tab = " " * 5
    assert text == (
        "Summarised report of diagnostics by file.\n\n"
        "▶ a.js\n"
        f"{tab}The file isn't formatted.\n\n"
        f"{tab}Some lint rules were triggered\n\n"
        f"{tab}Rule Name{' ' * 32}Diagnostics\n"
        f"{tab}noUnusedVariables{' ' * 24}1\n"
        "\n"
    )


def test_file_without_issues_renders_header_only(make_diagnostic) -> None:
    files = aggregate(ExecutionMode.CHECK, Severity.ERROR, False, [make_diagnostic(severity=Severity.HINT)])

    text = render_file_report(files, LAYOUT).plain

    assert text.endswith("▶ src/app.js\n\n")
    assert "Rule Name" not in text
    assert "isn't formatted" not in text


def test_formats_by_file_listing() -> None:
    assert render_formats_by_file(FormatsByFile()).plain == ""

    text = render_formats_by_file(FormatsByFile({"b.js", "a.js"})).plain

    assert text == "Files that haven't been formatted yet\n\na.js\nb.js\n"


def _summary_text(mode: ExecutionMode, summary: RunSummary) -> str:
    units = render_run_summary(Execution(mode=mode), summary, SummaryConfig())
    return "\n".join(unit.plain for unit in units)


def test_skipped_fixes_reported_in_check_mode() -> None:
    text = _summary_text(ExecutionMode.CHECK, RunSummary(suggested_fixes_skipped=3))

    assert "Skipped 3 suggested fixes." in text
    assert "lintsummary check --apply-unsafe" in text


def test_skipped_fixes_omitted_outside_check_mode() -> None:
    for mode in (ExecutionMode.LINT, ExecutionMode.FORMAT, ExecutionMode.CI):
        text = _summary_text(mode, RunSummary(suggested_fixes_skipped=3))
        assert "Skipped" not in text
        assert "--apply-unsafe" not in text


def test_not_printed_warning_outside_ci() -> None:
    text = _summary_text(ExecutionMode.CHECK, RunSummary(diagnostics_not_printed=5))

    assert "The number of diagnostics exceeds the number allowed by lintsummary." in text
    assert "Diagnostics not shown: 5." in text


def test_not_printed_warning_suppressed_in_ci() -> None:
    text = _summary_text(ExecutionMode.CI, RunSummary(diagnostics_not_printed=5))

    assert "exceeds" not in text
    assert "Diagnostics not shown" not in text


def test_traversal_summary_is_always_last() -> None:
    summary = RunSummary(
        unchanged=2,
        duration=timedelta(milliseconds=12),
        suggested_fixes_skipped=1,
        diagnostics_not_printed=1,
    )

    units = render_run_summary(Execution(mode=ExecutionMode.CHECK), summary, SummaryConfig())

    assert len(units) == 3
    assert units[-1].plain == "Checked 2 files in 12ms."


def test_run_summary_uses_configured_names() -> None:
    config = SummaryConfig(program_name="mytool", apply_unsafe_command="mytool fix --unsafe")
    summary = RunSummary(suggested_fixes_skipped=1, diagnostics_not_printed=1)

    text = "\n".join(unit.plain for unit in render_run_summary(Execution(), summary, config))

    assert "mytool fix --unsafe" in text
    assert "allowed by mytool." in text
