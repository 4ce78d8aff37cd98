# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging and errors)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from ..core.logging import fail as core_fail


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation flags."""

    console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = field(default=re.compile(r"([\w-]+)=(\".*?\"|\S+)"))

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def debug(self, message: str) -> None:
        """Emit ``message`` with ``key=value`` pairs highlighted when debugging.

        Args:
            message: Debug payload, typically ``key=value`` pairs.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(console: Console, *, emoji: bool, color: bool, debug: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` writing to ``console``.

    Args:
        console: Console shared with the command's report output.
        emoji: Whether log output may include emoji glyphs.
        color: Whether log output may be coloured.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger bound to ``console``.
    """

    return CLILogger(console=console, use_emoji=emoji, use_color=color, debug_enabled=debug)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
