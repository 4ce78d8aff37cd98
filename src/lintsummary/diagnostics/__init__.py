# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostics input helpers."""

from __future__ import annotations

from .json_import import PayloadError, SummaryInput, load_payload, parse_payload

__all__ = ["PayloadError", "SummaryInput", "load_payload", "parse_payload"]
