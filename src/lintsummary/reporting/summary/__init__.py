# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-file diagnostics summary: aggregation, tallies, and rendering."""

from __future__ import annotations

from .aggregate import aggregate, aggregate_payload
from .render import (
    render_file_report,
    render_formats_by_file,
    render_lints,
    render_run_summary,
    render_summary_diagnostics,
)
from .reporter import ReporterVisitor, SummaryReporter, SummaryReporterVisitor, write_summary_report
from .rules import RuleName, compare_for_display, display_order
from .tally import FileToDiagnostics, FormatsByFile, LintsByCategory, SummaryDiagnostics
from .traversal import format_duration, render_traversal_summary

__all__ = [
    "FileToDiagnostics",
    "FormatsByFile",
    "LintsByCategory",
    "ReporterVisitor",
    "RuleName",
    "SummaryDiagnostics",
    "SummaryReporter",
    "SummaryReporterVisitor",
    "aggregate",
    "aggregate_payload",
    "compare_for_display",
    "display_order",
    "format_duration",
    "render_file_report",
    "render_formats_by_file",
    "render_lints",
    "render_run_summary",
    "render_summary_diagnostics",
    "render_traversal_summary",
    "write_summary_report",
]
