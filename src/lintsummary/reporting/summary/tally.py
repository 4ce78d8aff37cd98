# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-file tallies of lint rule hits and formatting issues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .rules import RuleName, display_order


@dataclass(slots=True)
class LintsByCategory:
    """Count how many times each lint rule fired for one file."""

    counts: dict[RuleName, int] = field(default_factory=dict)

    def increment(self, rule: RuleName) -> None:
        self.counts[rule] = self.counts.get(rule, 0) + 1

    def get(self, rule: RuleName | str) -> int:
        """Return the count for ``rule``, ``0`` when it never fired."""

        key = rule if isinstance(rule, RuleName) else RuleName(rule)
        return self.counts.get(key, 0)

    def rows(self) -> list[tuple[RuleName, int]]:
        """Return ``(rule, count)`` pairs in table row order."""

        return [(rule, self.counts[rule]) for rule in display_order(self.counts)]

    def longest_name(self) -> int:
        """Return the character length of the longest rule name, ``0`` when empty."""

        return max((rule.name_len() for rule in self.counts), default=0)

    def as_dict(self) -> dict[str, int]:
        return {rule.name: count for rule, count in self.counts.items()}

    def __len__(self) -> int:
        return len(self.counts)

    def __bool__(self) -> bool:
        return bool(self.counts)


@dataclass(slots=True)
class SummaryDiagnostics:
    """Lint tally and format issue count for one file."""

    lints: LintsByCategory = field(default_factory=LintsByCategory)
    formats: int = 0

    @property
    def is_formatted(self) -> bool:
        return self.formats == 0


@dataclass(slots=True)
class FormatsByFile:
    """Sorted set of files with at least one formatting issue."""

    files: set[str] = field(default_factory=set)

    def add(self, file_name: str) -> None:
        self.files.add(file_name)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.files))

    def __len__(self) -> int:
        return len(self.files)


@dataclass(slots=True)
class FileToDiagnostics:
    """Map file paths to their :class:`SummaryDiagnostics`.

    Iteration yields entries in lexicographic path order regardless of the
    order files were tracked in.
    """

    entries: dict[str, SummaryDiagnostics] = field(default_factory=dict)

    def track_file(self, file_name: str) -> SummaryDiagnostics:
        """Record ``file_name`` as seen and return its summary.

        Args:
            file_name: Path exactly as supplied by the diagnostic producer.

        Returns:
            SummaryDiagnostics: Existing summary, or a new empty one.
        """

        summary = self.entries.get(file_name)
        if summary is None:
            summary = self.entries[file_name] = SummaryDiagnostics()
        return summary

    def get_summary(self, file_name: str) -> SummaryDiagnostics:
        """Return the summary of a tracked file.

        Raises:
            KeyError: If ``file_name`` has not been tracked.
        """

        return self.entries[file_name]

    def insert_lint(self, file_name: str, rule: RuleName) -> None:
        self.get_summary(file_name).lints.increment(rule)

    def insert_format(self, file_name: str) -> None:
        self.get_summary(file_name).formats += 1

    def formats_by_file(self) -> FormatsByFile:
        """Return the files carrying at least one formatting issue."""

        return FormatsByFile({name for name, summary in self.entries.items() if summary.formats})

    def items(self) -> Iterator[tuple[str, SummaryDiagnostics]]:
        for file_name in sorted(self.entries):
            yield file_name, self.entries[file_name]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries))

    def __contains__(self, file_name: object) -> bool:
        return file_name in self.entries

    def __getitem__(self, file_name: str) -> SummaryDiagnostics:
        return self.entries[file_name]

    def __len__(self) -> int:
        return len(self.entries)


__all__ = [
    "FileToDiagnostics",
    "FormatsByFile",
    "LintsByCategory",
    "SummaryDiagnostics",
]
