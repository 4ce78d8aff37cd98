# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import cache
from typing import IO

from rich.console import Console

from lintsummary.interfaces.core import ConsoleManager


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    return _is_tty(sys.stdout)


class RichConsoleManager(ConsoleManager):
    """Hand out report consoles keyed by colour and emoji preferences.

    Report consoles never highlight and always soft-wrap, so long rows keep
    their count column instead of being folded at the terminal edge. Consoles
    bound to an explicit ``file`` are built on demand and not cached.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool], Console] = {}

    def get(
        self,
        *,
        color: bool,
        emoji: bool,
        file: IO[str] | None = None,
        width: int | None = None,
    ) -> Console:
        """Return a report console.

        Args:
            color: ``True`` when ANSI colour is wanted; honoured only on a TTY.
            emoji: ``True`` when Rich should render emoji glyphs.
            file: Optional stream replacing stdout, e.g. a capture buffer.
            width: Optional fixed width; Rich measures the terminal otherwise.

        Returns:
            Console: Console writing to stdout or ``file``.
        """

        if file is not None:
            return _report_console(color=color, emoji=emoji, tty=_is_tty(file), file=file, width=width)
        tty = detect_tty()
        key = (color, emoji, tty)
        console = self._cache.get(key)
        if console is None or width is not None:
            console = _report_console(color=color, emoji=emoji, tty=tty, width=width)
            if width is None:
                self._cache[key] = console
        return console


def _is_tty(stream: IO[str]) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _report_console(
    *,
    color: bool,
    emoji: bool,
    tty: bool,
    file: IO[str] | None = None,
    width: int | None = None,
) -> Console:
    colored = color and tty
    return Console(
        file=file,
        width=width,
        color_system="auto" if colored else None,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


@cache
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager` instance."""

    return RichConsoleManager()


__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
]
