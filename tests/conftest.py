# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

import pytest
from rich.console import Console

from lintsummary.core.models import Diagnostic, DiagnosticTag
from lintsummary.core.severity import Severity
from lintsummary.runtime.console.manager import RichConsoleManager

DiagnosticFactory = Callable[..., Diagnostic]


@pytest.fixture
def make_diagnostic() -> DiagnosticFactory:
    """Return a factory building diagnostics with sensible defaults."""

    def factory(
        file: str | None = "src/app.js",
        category: str | None = "lint/style/useConst",
        severity: Severity = Severity.ERROR,
        *,
        verbose: bool = False,
    ) -> Diagnostic:
        tags = frozenset({DiagnosticTag.VERBOSE}) if verbose else frozenset()
        return Diagnostic(file=file, category=category, severity=severity, tags=tags)

    return factory


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def console(buffer: StringIO) -> Console:
    """Return a colourless console capturing output in ``buffer``."""

    return RichConsoleManager().get(color=False, emoji=False, file=buffer, width=200)
