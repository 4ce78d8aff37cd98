# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Whitespace helpers shared by every summary line."""

from __future__ import annotations

from lintsummary.config.models import ReportLayout


def padding(width: int) -> str:
    """Return a run of ``width`` spaces; negative widths yield an empty string."""

    return " " * max(width, 0)


def indent(layout: ReportLayout) -> str:
    """Return the indentation unit prefixed to nested report lines."""

    return padding(layout.indent_width)


__all__ = ["indent", "padding"]
