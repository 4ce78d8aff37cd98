# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``lintsummary report``: render the per-file summary of a recorded run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import Config, ConfigError, OutputConfig, load_config
from ..core.models import DiagnosticsPayload, Execution, ExecutionMode, RunSummary
from ..core.severity import Severity, parse_severity
from ..diagnostics import PayloadError, SummaryInput, load_payload
from ..reporting.output.markup import RichMarkupSink
from ..reporting.summary import write_summary_report
from ..runtime.console.manager import get_console_manager
from .shared import CLIError, CLILogger, build_cli_logger


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Command line overrides applied on top of configuration and payload."""

    payload_path: Path
    root: Path
    config_path: Path | None = None
    mode: ExecutionMode | None = None
    diagnostic_level: Severity | None = None
    verbose: bool | None = None
    color: bool | None = None
    emoji: bool | None = None
    formats_by_file: bool = False
    debug: bool = False


@dataclass(frozen=True, slots=True)
class ResolvedReport:
    """Inputs of one report after every override has been applied."""

    execution: Execution
    payload: DiagnosticsPayload
    summary: RunSummary


def resolve_report(options: ReportOptions, config: Config, document: SummaryInput) -> ResolvedReport:
    """Merge CLI options, the payload document, and configuration.

    Command line values win over the document, which wins over configuration.

    Args:
        options: Parsed command line options.
        config: Loaded configuration.
        document: Validated payload document.

    Returns:
        ResolvedReport: Effective execution, diagnostics, and run counters.
    """

    execution = document.execution
    if options.mode is not None:
        execution = execution.model_copy(update={"mode": options.mode})
    verbose = options.verbose
    if verbose is None:
        verbose = document.verbose or config.output.verbose
    payload = document.payload(
        default_level=config.summary.diagnostic_level,
        diagnostic_level=options.diagnostic_level,
        verbose=verbose,
    )
    return ResolvedReport(execution=execution, payload=payload, summary=document.summary)


def _load_inputs(options: ReportOptions) -> tuple[Config, SummaryInput]:
    try:
        config = load_config(options.root, options.config_path)
        document = load_payload(options.payload_path)
    except (ConfigError, PayloadError) as exc:
        raise CLIError(str(exc)) from exc
    return config, document


def run_report(options: ReportOptions, logger: CLILogger | None = None) -> int:
    """Render the report described by ``options``.

    Args:
        options: Parsed command line options.
        logger: Logger for status and errors; built from ``options`` when omitted.

    Returns:
        int: ``0`` on success.

    Raises:
        CLIError: If inputs cannot be loaded or the report cannot be written.
    """

    config, document = _load_inputs(options)
    if options.color is not None:
        config.output.color = options.color
    if options.emoji is not None:
        config.output.emoji = options.emoji
    if options.formats_by_file:
        config.summary.formats_by_file = True

    console = get_console_manager().get(color=config.output.color, emoji=config.output.emoji)
    active_logger = logger or build_cli_logger(
        console,
        emoji=config.output.emoji,
        color=config.output.color,
        debug=options.debug,
    )
    resolved = resolve_report(options, config, document)
    active_logger.debug(
        f"mode={resolved.execution.mode.value} level={resolved.payload.diagnostic_level.value} "
        f"verbose={resolved.payload.verbose} diagnostics={len(resolved.payload.diagnostics)}",
    )
    try:
        write_summary_report(
            RichMarkupSink(console),
            resolved.execution,
            resolved.payload,
            resolved.summary,
            config=config.summary,
        )
    except OSError as exc:
        raise CLIError(f"Failed to write report: {exc}") from exc
    return 0


def _parse_level_option(value: str | None) -> Severity | None:
    if value is None:
        return None
    try:
        return parse_severity(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--diagnostic-level'") from exc


def report_command(
    payload_path: Annotated[Path, typer.Argument(help="JSON document describing the run's diagnostics.")],
    mode: Annotated[
        ExecutionMode | None,
        typer.Option("--mode", "-m", case_sensitive=False, help="Execution mode override."),
    ] = None,
    diagnostic_level: Annotated[
        str | None,
        typer.Option(
            "--diagnostic-level",
            metavar="[hint|information|warning|error|fatal]",
            help="Minimum severity to tally (aliases: info, warn, err).",
        ),
    ] = None,
    verbose: Annotated[
        bool | None,
        typer.Option("--verbose/--no-verbose", help="Include verbose-only diagnostics."),
    ] = None,
    config_path: Annotated[Path | None, typer.Option("--config", help="Explicit TOML configuration file.")] = None,
    root: Annotated[Path, typer.Option("--root", help="Project root used to discover configuration.")] = Path("."),
    color: Annotated[bool | None, typer.Option("--color/--no-color", help="Toggle ANSI colour output.")] = None,
    emoji: Annotated[bool | None, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status lines.")] = None,
    formats_by_file: Annotated[
        bool,
        typer.Option("--formats-by-file", help="List files that still need formatting."),
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Print resolved settings.")] = False,
) -> None:
    """Summarise diagnostics per file and print the run summary."""

    options = ReportOptions(
        payload_path=payload_path,
        root=root,
        config_path=config_path,
        mode=mode,
        diagnostic_level=_parse_level_option(diagnostic_level),
        verbose=verbose,
        color=color,
        emoji=emoji,
        formats_by_file=formats_by_file,
        debug=debug,
    )
    try:
        exit_code = run_report(options)
    except CLIError as exc:
        defaults = OutputConfig()
        use_color = defaults.color if color is None else color
        use_emoji = defaults.emoji if emoji is None else emoji
        console = get_console_manager().get(color=use_color, emoji=use_emoji)
        build_cli_logger(console, emoji=use_emoji, color=use_color).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


__all__ = ["ReportOptions", "ResolvedReport", "report_command", "resolve_report", "run_report"]
