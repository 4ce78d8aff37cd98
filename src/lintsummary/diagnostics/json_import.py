# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load a run's diagnostics and counters from a JSON document."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..core.models import Diagnostic, DiagnosticsPayload, Execution, RunSummary
from ..core.severity import Severity, parse_severity

__all__ = ["PayloadError", "SummaryInput", "load_payload", "parse_payload"]

_LOCATION_KEY: Final[str] = "location"
_LOCATION_PATH_KEY: Final[str] = "path"
_FILE_KEY: Final[str] = "file"


class PayloadError(RuntimeError):
    """Raised when a diagnostics document cannot be read or validated."""


class _DiagnosticEntry(Diagnostic):
    """Diagnostic accepting either ``file`` or ``location.path``."""

    @model_validator(mode="before")
    @classmethod
    def _flatten_location(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or _FILE_KEY in data:
            return data
        location = data.get(_LOCATION_KEY)
        if not isinstance(location, Mapping):
            return data
        flattened = {key: value for key, value in data.items() if key != _LOCATION_KEY}
        flattened[_FILE_KEY] = location.get(_LOCATION_PATH_KEY)
        return flattened


class SummaryInput(BaseModel):
    """Everything the summary reporter needs for one run."""

    model_config = ConfigDict(frozen=True)

    execution: Execution = Field(default_factory=Execution)
    diagnostic_level: Severity | None = None
    verbose: bool = False
    diagnostics: tuple[_DiagnosticEntry, ...] = Field(default_factory=tuple)
    summary: RunSummary = Field(default_factory=RunSummary)

    @field_validator("diagnostic_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: str | Severity | None) -> Severity | None:
        return None if value is None else parse_severity(value)

    def payload(
        self,
        *,
        default_level: Severity,
        diagnostic_level: Severity | None = None,
        verbose: bool | None = None,
    ) -> DiagnosticsPayload:
        """Build the aggregator input.

        Explicit arguments win over the document, which wins over ``default_level``.

        Args:
            default_level: Threshold used when neither the caller nor the document sets one.
            diagnostic_level: Threshold overriding the document's value.
            verbose: Override for the document's verbose flag.

        Returns:
            DiagnosticsPayload: Diagnostics with their effective display settings.
        """

        return DiagnosticsPayload(
            diagnostics=self.diagnostics,
            diagnostic_level=diagnostic_level or self.diagnostic_level or default_level,
            verbose=self.verbose if verbose is None else verbose,
        )


def parse_payload(data: Any, *, source: str = "<memory>") -> SummaryInput:
    """Validate an already decoded JSON document.

    Args:
        data: Decoded JSON value.
        source: Origin of ``data`` used in error messages.

    Returns:
        SummaryInput: Validated run description.

    Raises:
        PayloadError: If ``data`` does not match the expected structure.
    """

    if not isinstance(data, Mapping):
        raise PayloadError(f"{source}: expected a JSON object at the top level")
    try:
        return SummaryInput.model_validate(data)
    except ValidationError as exc:
        raise PayloadError(f"{source}: {exc}") from exc


def load_payload(path: Path) -> SummaryInput:
    """Read and validate the diagnostics document at ``path``.

    Raises:
        PayloadError: If the file cannot be read or decoded, or holds an invalid document.
    """

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PayloadError(f"Unable to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PayloadError(f"{path} is not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{path} is not valid JSON: {exc}") from exc
    return parse_payload(data, source=str(path))
