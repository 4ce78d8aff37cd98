# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Closing line describing how many files the run visited."""

from __future__ import annotations

from datetime import timedelta

from lintsummary.core.models import Execution, RunSummary
from lintsummary.reporting.output.markup import Markup, StyleRole

_MICROS_PER_MILLI = 1_000
_MICROS_PER_SECOND = 1_000_000


def format_duration(duration: timedelta) -> str:
    """Render ``duration`` compactly (``850µs``, ``12ms``, ``1.5s``)."""

    micros = duration // timedelta(microseconds=1)
    if micros < _MICROS_PER_MILLI:
        return f"{micros}µs"
    if micros < _MICROS_PER_SECOND:
        return f"{micros // _MICROS_PER_MILLI}ms"
    seconds = round(micros / _MICROS_PER_SECOND, 3)
    return f"{seconds:g}s"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _total_line(execution: Execution, summary: RunSummary) -> str:
    verb = "Formatted" if execution.is_format() and execution.write else "Checked"
    return f"{verb} {_plural(summary.files_processed, 'file')} in {format_duration(summary.duration)}."


def _detail_line(execution: Execution, summary: RunSummary) -> str:
    if execution.is_ci() or not execution.write:
        return ""
    if summary.changed > 0:
        return f" Fixed {_plural(summary.changed, 'file')}."
    return " No fixes applied."


def render_traversal_summary(execution: Execution, summary: RunSummary) -> Markup:
    """Compose the traversal summary for ``execution``.

    Args:
        execution: Execution context of the run.
        summary: Counters gathered while traversing files.

    Returns:
        Markup: File totals, the fix detail when fixes could be written, then
        error and warning counts when non-zero.
    """

    markup = Markup().write_styled(_total_line(execution, summary) + _detail_line(execution, summary), StyleRole.INFO)
    if summary.errors > 0:
        markup.write_text("\n").write_styled(f"Found {_plural(summary.errors, 'error')}.", StyleRole.ERROR)
    if summary.warnings > 0:
        markup.write_text("\n").write_styled(f"Found {_plural(summary.warnings, 'warning')}.", StyleRole.WARN)
    return markup


__all__ = ["format_duration", "render_traversal_summary"]
