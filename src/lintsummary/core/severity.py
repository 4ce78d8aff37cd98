# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to diagnostics, from least to most severe."""

    HINT = "hint"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        """Return the position of the severity within the ordered scale.

        Returns:
            int: ``0`` for :attr:`HINT` up to ``4`` for :attr:`FATAL`.
        """

        return _SEVERITY_RANK[self]

    def at_least(self, threshold: Severity) -> bool:
        """Return whether this severity meets ``threshold``.

        Args:
            threshold: Minimum severity a diagnostic must reach.

        Returns:
            bool: ``True`` when ``self`` is equal to or above ``threshold``.
        """

        return self.rank >= threshold.rank


_SEVERITY_RANK: Final[dict[Severity, int]] = {
    Severity.HINT: 0,
    Severity.INFORMATION: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
    Severity.FATAL: 4,
}

_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "info": Severity.INFORMATION,
    "warn": Severity.WARNING,
    "err": Severity.ERROR,
}


def parse_severity(value: str | Severity) -> Severity:
    """Convert user supplied text into a :class:`Severity`.

    Args:
        value: Severity name (case-insensitive) or an existing severity.

    Returns:
        Severity: Matching severity value.

    Raises:
        ValueError: If ``value`` does not name a known severity.
    """

    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        raise ValueError(f"severity must be a string, got {type(value).__name__}")
    key = value.strip().lower()
    if key in _SEVERITY_ALIASES:
        return _SEVERITY_ALIASES[key]
    return Severity(key)


__all__ = ["Severity", "parse_severity"]
