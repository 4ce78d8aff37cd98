# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the lintsummary reporter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from ..core.severity import Severity, parse_severity

DEFAULT_INDENT_WIDTH: Final[int] = 5
DEFAULT_COLUMN_PADDING: Final[int] = 15
DEFAULT_PROGRAM_NAME: Final[str] = "lintsummary"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ReportLayout(BaseModel):
    """Fixed whitespace used to lay out the per-file report."""

    model_config = ConfigDict(frozen=True)

    indent_width: PositiveInt = DEFAULT_INDENT_WIDTH
    padding: PositiveInt = DEFAULT_COLUMN_PADDING


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True)

    color: bool = True
    emoji: bool = True
    verbose: bool = False


class SummaryConfig(BaseModel):
    """Settings controlling the summary report content."""

    model_config = ConfigDict(validate_assignment=True)

    program_name: str = DEFAULT_PROGRAM_NAME
    apply_unsafe_command: str = f"{DEFAULT_PROGRAM_NAME} check --apply-unsafe"
    diagnostic_level: Severity = Severity.INFORMATION
    formats_by_file: bool = False
    layout: ReportLayout = Field(default_factory=ReportLayout)

    @field_validator("diagnostic_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: str | Severity) -> Severity:
        return parse_severity(value)


class Config(BaseModel):
    """Top-level configuration object."""

    model_config = ConfigDict(validate_assignment=True)

    output: OutputConfig = Field(default_factory=OutputConfig)
    summary: SummaryConfig = Field(default_factory=SummaryConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str = "configuration") -> Config:
        """Validate ``data`` into a :class:`Config`.

        Args:
            data: Merged configuration fragments.
            source: Human-readable origin used in error messages.

        Returns:
            Config: Validated configuration.

        Raises:
            ConfigError: If ``data`` fails validation.
        """

        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigError(f"Invalid {source}: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the configuration."""

        return self.model_dump(mode="json")


__all__ = [
    "Config",
    "ConfigError",
    "OutputConfig",
    "ReportLayout",
    "SummaryConfig",
]
