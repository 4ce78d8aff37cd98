# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Two-phase summary reporter: per-file diagnostics first, run counters second."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from lintsummary.config.models import SummaryConfig
from lintsummary.core.models import DiagnosticsPayload, Execution, RunSummary
from lintsummary.interfaces.output import MarkupSink

from .aggregate import aggregate_payload
from .render import render_file_report, render_formats_by_file, render_run_summary


class ReporterVisitor(Protocol):
    """Receive the two phases of a report."""

    def report_diagnostics(self, execution: Execution, payload: DiagnosticsPayload) -> None:
        """Report the diagnostics of the run."""
        raise NotImplementedError

    def report_summary(self, execution: Execution, summary: RunSummary) -> None:
        """Report the counters of the run."""
        raise NotImplementedError


@dataclass(slots=True)
class SummaryReporterVisitor:
    """Write the summary report to a :class:`MarkupSink`.

    Sink failures propagate as :class:`OSError` and stop the report.
    """

    sink: MarkupSink
    config: SummaryConfig = field(default_factory=SummaryConfig)

    def report_diagnostics(self, execution: Execution, payload: DiagnosticsPayload) -> None:
        """Aggregate ``payload`` per file and log the resulting report.

        Args:
            execution: Execution context deciding which categories count.
            payload: Diagnostics with their severity threshold and verbosity.
        """

        files = aggregate_payload(execution.mode, payload)
        self.sink.log(render_file_report(files, self.config.layout))
        if self.config.formats_by_file:
            formats = files.formats_by_file()
            if formats:
                self.sink.log(render_formats_by_file(formats))

    def report_summary(self, execution: Execution, summary: RunSummary) -> None:
        for unit in render_run_summary(execution, summary, self.config):
            self.sink.log(unit)


@dataclass(frozen=True, slots=True)
class SummaryReporter:
    """Bundle everything a summary report needs."""

    execution: Execution
    payload: DiagnosticsPayload
    summary: RunSummary

    def write(self, visitor: ReporterVisitor) -> None:
        """Drive ``visitor`` through the diagnostics phase, then the summary phase.

        Raises:
            OSError: If the visitor's output fails; the summary phase is skipped
                when the diagnostics phase fails.
        """

        visitor.report_diagnostics(self.execution, self.payload)
        visitor.report_summary(self.execution, self.summary)


def write_summary_report(
    sink: MarkupSink,
    execution: Execution,
    payload: DiagnosticsPayload,
    summary: RunSummary,
    *,
    config: SummaryConfig | None = None,
) -> None:
    """Render the full summary report for one run into ``sink``.

    Args:
        sink: Destination for the rendered units.
        execution: Execution context of the run.
        payload: Diagnostics produced by the run.
        summary: Counters collected for the run.
        config: Report settings; defaults are used when omitted.

    Raises:
        OSError: If ``sink`` rejects a write.
    """

    visitor = SummaryReporterVisitor(sink, config or SummaryConfig())
    SummaryReporter(execution, payload, summary).write(visitor)


__all__ = [
    "ReporterVisitor",
    "SummaryReporter",
    "SummaryReporterVisitor",
    "write_summary_report",
]
