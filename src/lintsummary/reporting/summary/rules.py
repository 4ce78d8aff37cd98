# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Lint rule identifiers and their display ordering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from lintsummary.core.models import LINT_CATEGORY_PREFIX


@dataclass(frozen=True, slots=True)
class RuleName:
    """Identify a lint rule within a per-file tally.

    Two comparisons exist on purpose. Identity (``==`` and hashing, see
    :meth:`same_rule`) uses the exact rule name so that distinct rules never
    share a tally entry. Display ordering (:meth:`display_key` and
    :func:`compare_for_display`) only looks at the name length, so rules of
    equal length compare as equal for layout purposes.
    """

    name: str

    @classmethod
    def from_category(cls, category: str) -> RuleName:
        """Build the rule identifier for a ``lint/`` category name.

        Args:
            category: Category such as ``lint/suspicious/noDebugger``.

        Returns:
            RuleName: Rule named after the category without its ``lint/`` prefix.
        """

        return cls(category.removeprefix(LINT_CATEGORY_PREFIX))

    def same_rule(self, other: RuleName) -> bool:
        """Return whether ``other`` names exactly the same rule."""

        return self.name == other.name

    def name_len(self) -> int:
        return len(self.name)

    def display_key(self) -> int:
        """Return the sort key used to position the rule in rendered tables."""

        return self.name_len()

    def __str__(self) -> str:
        return self.name


def compare_for_display(left: RuleName, right: RuleName) -> int:
    """Compare two rules by display position.

    Args:
        left: First rule.
        right: Second rule.

    Returns:
        int: Negative when ``left`` sorts first, positive when ``right`` does,
        ``0`` when both names have the same length.
    """

    return left.display_key() - right.display_key()


def display_order(rules: Iterable[RuleName]) -> list[RuleName]:
    """Return ``rules`` in table row order.

    Rows run from the longest name to the shortest. Names of equal length
    appear in ascending lexicographic order.

    Args:
        rules: Rules to order.

    Returns:
        list[RuleName]: Ordered rules.
    """

    return sorted(rules, key=lambda rule: (-rule.display_key(), rule.name))


__all__ = ["RuleName", "compare_for_display", "display_order"]
