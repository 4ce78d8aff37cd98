# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for lintsummary."""

from __future__ import annotations

from .loaders import load_config
from .models import Config, ConfigError, OutputConfig, ReportLayout, SummaryConfig

__all__ = [
    "Config",
    "ConfigError",
    "OutputConfig",
    "ReportLayout",
    "SummaryConfig",
    "load_config",
]
