# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render aggregated diagnostics and run counters as styled text."""

from __future__ import annotations

from typing import Final

from lintsummary.config.models import ReportLayout, SummaryConfig
from lintsummary.core.models import Execution, RunSummary
from lintsummary.reporting.output.markup import Markup, StyleRole

from .layout import indent, padding
from .tally import FileToDiagnostics, FormatsByFile, LintsByCategory, SummaryDiagnostics
from .traversal import render_traversal_summary

RULE_NAME_HEADER: Final[str] = "Rule Name"
DIAGNOSTICS_HEADER: Final[str] = "Diagnostics"
FILE_MARKER: Final[str] = "▶ "


def render_lints(lints: LintsByCategory, layout: ReportLayout) -> Markup:
    """Render the rule name / diagnostics count table for one file.

    The count column starts at the same offset on every row: the indentation,
    the longest rule name, the layout padding and the width of the
    ``Rule Name`` header.

    Args:
        lints: Tally to render.
        layout: Indentation and padding widths.

    Returns:
        Markup: Table markup, empty when no rule fired.
    """

    markup = Markup()
    if not lints:
        return markup
    tab = indent(layout)
    longest = lints.longest_name()
    count_offset = longest + layout.padding + len(RULE_NAME_HEADER)

    markup.write_text(tab).write_styled("Some lint rules were triggered", StyleRole.INFO).write_text("\n\n")
    markup.write_text(tab).write_styled(RULE_NAME_HEADER, StyleRole.INFO, StyleRole.UNDERLINE)
    markup.write_text(padding(longest + layout.padding))
    markup.write_styled(DIAGNOSTICS_HEADER, StyleRole.INFO, StyleRole.DIM).write_text("\n")
    for rule, count in lints.rows():
        markup.write_text(tab).write_styled(rule.name, StyleRole.EMPHASIS)
        markup.write_text(padding(count_offset - rule.name_len()))
        markup.write_text(f"{count}\n")
    return markup


def render_summary_diagnostics(summary: SummaryDiagnostics, layout: ReportLayout) -> Markup:
    """Render the format notice and lint table of one file."""

    markup = Markup()
    if not summary.is_formatted:
        markup.write_text(indent(layout)).write_styled("The file isn't formatted.", StyleRole.INFO)
        markup.write_text("\n\n")
    return markup.extend(render_lints(summary.lints, layout))


def render_file_report(files: FileToDiagnostics, layout: ReportLayout) -> Markup:
    """Render every tracked file in path order.

    Args:
        files: Aggregated per-file summaries.
        layout: Indentation and padding widths.

    Returns:
        Markup: The report introduction followed by one block per file.
    """

    markup = Markup().write_styled("Summarised report of diagnostics by file.", StyleRole.INFO)
    markup.write_text("\n\n")
    for file_name, summary in files.items():
        markup.write_text(FILE_MARKER).write_styled(file_name, StyleRole.EMPHASIS).write_text("\n")
        markup.extend(render_summary_diagnostics(summary, layout))
        markup.write_text("\n")
    return markup


def render_formats_by_file(formats: FormatsByFile) -> Markup:
    """List files that still need formatting; empty when there are none."""

    markup = Markup()
    if not formats:
        return markup
    markup.write_styled("Files that haven't been formatted yet", StyleRole.INFO).write_text("\n\n")
    for file_name in formats:
        markup.write_styled(file_name, StyleRole.EMPHASIS).write_text("\n")
    return markup


def render_run_summary(execution: Execution, summary: RunSummary, config: SummaryConfig) -> list[Markup]:
    """Compose the run level notices followed by the traversal summary.

    Args:
        execution: Execution context of the run.
        summary: Counters collected for the whole run.
        config: Report settings naming the program and its unsafe-fix command.

    Returns:
        list[Markup]: Units to log in order; the traversal summary is always last.
    """

    units: list[Markup] = []
    if execution.is_check() and summary.suggested_fixes_skipped > 0:
        skipped = Markup()
        skipped.write_styled(f"Skipped {summary.suggested_fixes_skipped} suggested fixes.\n", StyleRole.WARN)
        skipped.write_styled("If you wish to apply the suggested (unsafe) fixes, use the command ", StyleRole.INFO)
        skipped.write_styled(f"{config.apply_unsafe_command}\n", StyleRole.INFO, StyleRole.EMPHASIS)
        units.append(skipped)

    if not execution.is_ci() and summary.diagnostics_not_printed > 0:
        capped = Markup()
        capped.write_styled(
            f"The number of diagnostics exceeds the number allowed by {config.program_name}.\n",
            StyleRole.WARN,
        )
        capped.write_styled("Diagnostics not shown: ", StyleRole.INFO)
        capped.write_styled(str(summary.diagnostics_not_printed), StyleRole.EMPHASIS)
        capped.write_styled(".", StyleRole.INFO)
        units.append(capped)

    units.append(render_traversal_summary(execution, summary))
    return units


__all__ = [
    "DIAGNOSTICS_HEADER",
    "FILE_MARKER",
    "RULE_NAME_HEADER",
    "render_file_report",
    "render_formats_by_file",
    "render_lints",
    "render_run_summary",
    "render_summary_diagnostics",
]
