# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Group a diagnostic stream into per-file tallies."""

from __future__ import annotations

from collections.abc import Iterable

from lintsummary.core.models import (
    FORMAT_CATEGORY_PREFIX,
    LINT_CATEGORY_PREFIX,
    Diagnostic,
    DiagnosticsPayload,
    ExecutionMode,
)
from lintsummary.core.severity import Severity

from .rules import RuleName
from .tally import FileToDiagnostics


def aggregate(
    mode: ExecutionMode,
    severity_threshold: Severity,
    verbose: bool,
    diagnostics: Iterable[Diagnostic],
) -> FileToDiagnostics:
    """Tally lint rule hits and format issues per file.

    Every diagnostic attached to a file registers that file, even when the
    diagnostic is then filtered out, so files whose diagnostics all fall below
    ``severity_threshold`` still appear with empty tallies. Diagnostics without
    a file are ignored.

    Args:
        mode: Execution mode the diagnostics were produced under.
        severity_threshold: Minimum severity a diagnostic needs to be tallied.
        verbose: Whether verbose-only diagnostics were requested.
        diagnostics: Diagnostics in emission order.

    Returns:
        FileToDiagnostics: Per-file summaries keyed by file path.
    """

    files = FileToDiagnostics()
    for diagnostic in diagnostics:
        file_name = diagnostic.file
        if file_name is None:
            continue
        files.track_file(file_name)

        if not diagnostic.severity.at_least(severity_threshold):
            continue

        is_lint = diagnostic.has_category_prefix(LINT_CATEGORY_PREFIX)
        if diagnostic.is_verbose:
            if not verbose:
                continue
            if is_lint and (mode.is_check or mode.is_lint):
                files.insert_lint(file_name, RuleName.from_category(diagnostic.category or ""))
        elif is_lint and (mode.is_check or mode.is_lint or mode.is_ci):
            files.insert_lint(file_name, RuleName.from_category(diagnostic.category or ""))

        if diagnostic.has_category_prefix(FORMAT_CATEGORY_PREFIX) and (
            mode.is_check or mode.is_format or mode.is_ci
        ):
            files.insert_format(file_name)
    return files


def aggregate_payload(mode: ExecutionMode, payload: DiagnosticsPayload) -> FileToDiagnostics:
    """Run :func:`aggregate` with the settings carried by ``payload``."""

    return aggregate(mode, payload.diagnostic_level, payload.verbose, payload.diagnostics)


__all__ = ["aggregate", "aggregate_payload"]
