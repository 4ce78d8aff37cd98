# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration sources (defaults, TOML, pyproject) and the layered loader."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from .models import Config, ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PROJECT_CONFIG_FILENAME: Final[str] = ".lintsummary.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintsummary"


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return configuration values as a mapping."""
        raise NotImplementedError

    def describe(self) -> str:
        """Return a human-readable description of the source."""
        raise NotImplementedError


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().to_dict()

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource:
    """Load configuration data from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        """Read the TOML document, returning an empty mapping when it is absent.

        Raises:
            ConfigError: If the document cannot be read or parsed.
        """

        if not self._path.exists():
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to parse {self._path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Failed to read {self._path}: {exc}") from exc

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.lintsummary]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` recursively, returning a new mapping."""

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def default_sources(root: Path, explicit: Path | None = None) -> list[ConfigSource]:
    """Return configuration sources in increasing order of precedence.

    Args:
        root: Project directory searched for ``pyproject.toml`` and
            ``.lintsummary.toml``.
        explicit: Configuration file passed on the command line.

    Returns:
        list[ConfigSource]: Sources to merge, lowest precedence first.

    Raises:
        ConfigError: If ``explicit`` does not exist.
    """

    sources: list[ConfigSource] = [
        DefaultConfigSource(),
        PyProjectConfigSource(root / PYPROJECT_FILENAME),
        TomlConfigSource(root / PROJECT_CONFIG_FILENAME),
    ]
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Configuration file not found: {explicit}")
        sources.append(TomlConfigSource(explicit))
    return sources


def load_config(
    root: Path,
    explicit: Path | None = None,
    *,
    sources: Sequence[ConfigSource] | None = None,
) -> Config:
    """Load and validate configuration for ``root``.

    Args:
        root: Project directory used to discover configuration files.
        explicit: Optional configuration file overriding discovered ones.
        sources: Explicit source list replacing the discovered defaults.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If any source is unreadable or the merged data is invalid.
    """

    active = list(sources) if sources is not None else default_sources(root, explicit)
    merged: dict[str, Any] = {}
    for source in active:
        fragment = source.load()
        if not isinstance(fragment, Mapping):
            raise ConfigError(f"{source.describe()} must be a table")
        merged = deep_merge(merged, fragment)
    names = ", ".join(source.describe() for source in active)
    return Config.from_mapping(merged, source=f"configuration ({names})")


__all__ = [
    "ConfigSource",
    "DefaultConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "deep_merge",
    "default_sources",
    "load_config",
]
