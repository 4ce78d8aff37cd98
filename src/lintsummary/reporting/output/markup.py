# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Styled text composition and the Rich-backed markup sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class StyleRole(str, Enum):
    """Named presentation roles a reporter may request for a fragment."""

    EMPHASIS = "emphasis"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    UNDERLINE = "underline"
    DIM = "dim"

    @property
    def style_name(self) -> str:
        """Return the theme key Rich resolves for this role."""
        return f"lintsummary.{self.value}"


ROLE_THEME: Final[Theme] = Theme(
    {
        StyleRole.EMPHASIS.style_name: "bold",
        StyleRole.INFO.style_name: "green",
        StyleRole.WARN.style_name: "yellow",
        StyleRole.ERROR.style_name: "red",
        StyleRole.UNDERLINE.style_name: "underline",
        StyleRole.DIM.style_name: "dim",
    },
)


@dataclass(frozen=True, slots=True)
class MarkupFragment:
    """Run of text carrying zero or more style roles."""

    text: str
    roles: tuple[StyleRole, ...] = ()


@dataclass(slots=True)
class Markup:
    """Ordered sequence of fragments forming one logical output unit."""

    fragments: list[MarkupFragment] = field(default_factory=list)

    def write_text(self, text: str) -> Markup:
        """Append unstyled ``text`` and return ``self`` for chaining."""

        if text:
            self.fragments.append(MarkupFragment(text))
        return self

    def write_styled(self, text: str, *roles: StyleRole) -> Markup:
        """Append ``text`` wrapped in ``roles`` and return ``self`` for chaining.

        Args:
            text: Fragment text.
            *roles: Style roles applied to the fragment, outermost first.

        Returns:
            Markup: The same instance, to allow chained writes.
        """

        if text:
            self.fragments.append(MarkupFragment(text, tuple(roles)))
        return self

    def extend(self, other: Markup) -> Markup:
        """Append every fragment of ``other`` and return ``self``."""

        self.fragments.extend(other.fragments)
        return self

    @property
    def plain(self) -> str:
        """Return the fragment text without any styling."""
        return "".join(fragment.text for fragment in self.fragments)

    def to_text(self) -> Text:
        """Convert the fragments into a Rich :class:`Text` instance.

        Returns:
            Text: Text whose spans reference :data:`ROLE_THEME` style names.
        """

        text = Text()
        for fragment in self.fragments:
            start = len(text)
            text.append(fragment.text)
            for role in fragment.roles:
                text.stylize(role.style_name, start, len(text))
        return text


class RichMarkupSink:
    """Markup sink printing each unit to a Rich console.

    Write failures raised by the console's file propagate to the caller.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    @property
    def console(self) -> Console:
        return self._console

    def log(self, markup: Markup) -> None:
        """Print ``markup`` followed by a newline.

        Args:
            markup: Composed unit to render.

        Raises:
            OSError: If the console's output file rejects the write.
        """

        with self._console.use_theme(ROLE_THEME):
            self._console.print(markup.to_text())


__all__ = [
    "ROLE_THEME",
    "Markup",
    "MarkupFragment",
    "RichMarkupSink",
    "StyleRole",
]
