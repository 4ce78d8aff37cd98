# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Core service interfaces shared across the project."""

from __future__ import annotations

from typing import IO, Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class ConsoleManager(Protocol):
    """Manage console instances keyed by output preferences."""

    def get(
        self,
        *,
        color: bool,
        emoji: bool,
        file: IO[str] | None = None,
        width: int | None = None,
    ) -> Console:
        """Return a console configured according to the requested options."""

        raise NotImplementedError


__all__ = ["ConsoleManager"]
