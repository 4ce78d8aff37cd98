# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the collaborators lintsummary talks to."""

from __future__ import annotations

from .core import ConsoleManager
from .output import MarkupSink

__all__ = ["ConsoleManager", "MarkupSink"]
