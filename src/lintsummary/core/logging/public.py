# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing status messages with optional colour and emoji support."""

from __future__ import annotations

from typing import Final, NamedTuple

from rich.console import Console
from rich.text import Text

from lintsummary.runtime.console.manager import detect_tty, get_console_manager


class _Level(NamedTuple):
    symbol: str
    style: str


_INFO: Final[_Level] = _Level("ℹ️ ", "cyan")
_OK: Final[_Level] = _Level("✅ ", "green")
_WARN: Final[_Level] = _Level("⚠️ ", "yellow")
_FAIL: Final[_Level] = _Level("❌ ", "red")


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _emit(
    msg: str,
    level: _Level,
    *,
    use_emoji: bool,
    use_color: bool | None,
    console: Console | None,
) -> None:
    """Print ``msg`` prefixed and styled according to ``level``.

    Args:
        msg: Message text to print.
        level: Symbol and style pair for the message category.
        use_emoji: Flag indicating whether the emoji prefix is rendered.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Explicit console to print to instead of the shared one.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    target = console or get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(f"{emoji(level.symbol, use_emoji)}{msg}")
    if color_enabled:
        text.stylize(level.style)
    target.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an informational message."""

    _emit(msg, _INFO, use_emoji=use_emoji, use_color=use_color, console=console)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit a success message."""

    _emit(msg, _OK, use_emoji=use_emoji, use_color=use_color, console=console)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit a warning message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Console receiving the message; defaults to the shared console.
    """

    _emit(msg, _WARN, use_emoji=use_emoji, use_color=use_color, console=console)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None, console: Console | None = None) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Console receiving the message; defaults to the shared console.
    """

    _emit(msg, _FAIL, use_emoji=use_emoji, use_color=use_color, console=console)


__all__ = ["emoji", "fail", "info", "ok", "warn"]
