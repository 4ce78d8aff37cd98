# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Output sink interfaces consumed by reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lintsummary.reporting.output.markup import Markup


@runtime_checkable
class MarkupSink(Protocol):
    """Destination accepting composed units of styled text."""

    def log(self, markup: Markup) -> None:
        """Write ``markup`` as a single unit.

        Raises:
            OSError: If the underlying destination rejects the write.
        """

        raise NotImplementedError


__all__ = ["MarkupSink"]
