# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Styled output composition and sinks."""

from __future__ import annotations

from .markup import ROLE_THEME, Markup, MarkupFragment, RichMarkupSink, StyleRole

__all__ = ["ROLE_THEME", "Markup", "MarkupFragment", "RichMarkupSink", "StyleRole"]
