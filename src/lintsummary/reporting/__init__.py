# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: markup output and the per-file diagnostics summary."""

from .output.markup import Markup, RichMarkupSink, StyleRole
from .summary import (
    FileToDiagnostics,
    SummaryReporter,
    SummaryReporterVisitor,
    aggregate,
    write_summary_report,
)

__all__ = [
    "FileToDiagnostics",
    "Markup",
    "RichMarkupSink",
    "StyleRole",
    "SummaryReporter",
    "SummaryReporterVisitor",
    "aggregate",
    "write_summary_report",
]
