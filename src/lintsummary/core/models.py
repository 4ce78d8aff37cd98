# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintsummary package."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator

from .severity import Severity, parse_severity

LINT_CATEGORY_PREFIX = "lint/"
FORMAT_CATEGORY_PREFIX = "format"


class DiagnosticTag(str, Enum):
    """Flags attached to a diagnostic by the tool that produced it."""

    VERBOSE = "verbose"
    FIXABLE = "fixable"
    INTERNAL = "internal"
    UNNECESSARY_CODE = "unnecessary_code"
    DEPRECATED_CODE = "deprecated_code"


class ExecutionMode(str, Enum):
    """High level operation performed by the CLI run."""

    CHECK = "check"
    LINT = "lint"
    FORMAT = "format"
    CI = "ci"

    @property
    def is_check(self) -> bool:
        return self is ExecutionMode.CHECK

    @property
    def is_lint(self) -> bool:
        return self is ExecutionMode.LINT

    @property
    def is_format(self) -> bool:
        return self is ExecutionMode.FORMAT

    @property
    def is_ci(self) -> bool:
        return self is ExecutionMode.CI


class Execution(BaseModel):
    """Execution context the diagnostics were produced under.

    ``write`` records whether the run applied fixes (check/lint) or wrote
    formatted output (format). CI runs never write.
    """

    model_config = ConfigDict(frozen=True)

    mode: ExecutionMode = ExecutionMode.CHECK
    write: bool = False

    def is_check(self) -> bool:
        """Return ``True`` when the run executed in check mode."""
        return self.mode.is_check

    def is_lint(self) -> bool:
        """Return ``True`` when the run executed in lint mode."""
        return self.mode.is_lint

    def is_format(self) -> bool:
        """Return ``True`` when the run executed in format mode."""
        return self.mode.is_format

    def is_ci(self) -> bool:
        """Return ``True`` when the run executed in CI mode."""
        return self.mode.is_ci


class Diagnostic(BaseModel):
    """Single issue reported by a lint or format pass."""

    model_config = ConfigDict(frozen=True)

    file: str | None = None
    category: str | None = None
    severity: Severity = Severity.ERROR
    tags: frozenset[DiagnosticTag] = Field(default_factory=frozenset)
    message: str = ""

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, value: str | Severity) -> Severity:
        """Accept case-insensitive severity names and common aliases.

        Args:
            value: Raw severity supplied by the producer.

        Returns:
            Severity: Normalised severity value.
        """

        return parse_severity(value)

    @property
    def is_verbose(self) -> bool:
        """Return whether the diagnostic is only shown in verbose output."""
        return DiagnosticTag.VERBOSE in self.tags

    def has_category_prefix(self, prefix: str) -> bool:
        """Return whether the category name starts with ``prefix``.

        Args:
            prefix: Category prefix such as ``lint/`` or ``format``.

        Returns:
            bool: ``False`` when the diagnostic has no category.
        """

        return self.category is not None and self.category.startswith(prefix)


class DiagnosticsPayload(BaseModel):
    """Diagnostics emitted by a run together with their display settings."""

    model_config = ConfigDict(frozen=True)

    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)
    diagnostic_level: Severity = Severity.HINT
    verbose: bool = False

    @field_validator("diagnostic_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: str | Severity) -> Severity:
        return parse_severity(value)


class RunSummary(BaseModel):
    """Counters collected by the traversal layer for the whole run."""

    model_config = ConfigDict(frozen=True)

    changed: NonNegativeInt = 0
    unchanged: NonNegativeInt = 0
    duration: timedelta = timedelta(0)
    errors: NonNegativeInt = 0
    warnings: NonNegativeInt = 0
    skipped: NonNegativeInt = 0
    suggested_fixes_skipped: NonNegativeInt = 0
    diagnostics_not_printed: NonNegativeInt = 0

    @property
    def files_processed(self) -> int:
        """Return the number of files the traversal visited."""
        return self.changed + self.unchanged


__all__ = [
    "FORMAT_CATEGORY_PREFIX",
    "LINT_CATEGORY_PREFIX",
    "Diagnostic",
    "DiagnosticTag",
    "DiagnosticsPayload",
    "Execution",
    "ExecutionMode",
    "RunSummary",
]
