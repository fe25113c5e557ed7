# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide a basic logger that records plain-text copies of its output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from rich.console import RenderableType


class Log:
    def __init__(self) -> None:
        self.set_color(False)
        self._console = Console(color_system=None, soft_wrap=True)
        self._record: list[str] = []

    def __call__(self, *lines: RenderableType | str) -> None:  # noqa: D102
        self.render(*lines)

    def render(self, *items: RenderableType | str) -> None:  # noqa: D102
        for item in items:
            self._out.print(item)
            self._out.file.flush()
            with self._console.capture() as capture:
                self._console.print(item)
            self._record.extend(capture.get().strip().split("\n"))

    def set_color(self, enabled: bool) -> None:
        """Switch colored terminal output on or off.

        Recorded lines never contain color codes, regardless.

        """
        self._out = Console(
            highlight=False,
            soft_wrap=True,
            color_system="auto" if enabled else None,
        )

    def clear(self) -> None:  # noqa: D102
        self._record = []

    def dump(self) -> str:  # noqa: D102
        return "\n".join(self._record)

    @property
    def lines(self) -> tuple[str, ...]:  # noqa: D102
        return tuple(self._record)


LOG = Log()
