# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console utilities for runtime output."""

from __future__ import annotations

from lintsummary.interfaces.core import ConsoleManager

from .manager import RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleManager", "RichConsoleManager", "detect_tty", "get_console_manager"]
