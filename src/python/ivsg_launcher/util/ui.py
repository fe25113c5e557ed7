# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Helper functions for simple text UI output.

The functions in this module all return ``rich`` renderables, so that
callers can decide whether and how to colorize them.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = (
    "UI_WIDTH",
    "banner",
    "error",
    "failed",
    "passed",
    "shell",
    "warn",
)

#: Width for terminal output headers and footers.
UI_WIDTH = 80


def _format_details(details: Iterable[str] | None = None) -> str:
    if details:
        lines = "\n".join(f"   {escape(line)}" for line in details)
        return f"\n{lines}\n"
    return ""


def banner(title: str, content: str) -> Panel:
    """Generate a titled banner, with details included.

    Parameters
    ----------
    title : str
        Text to display in the title area of the banner

    content : str
        Text to display in the body of the banner

    Returns
    -------
        Panel

    """
    return Panel(content, width=UI_WIDTH, title=title, title_align="left")


def error(text: str) -> Text:
    """Format text as an error.

    Parameters
    ----------
    text : str
        The text to format

    Returns
    -------
        Text

    """
    return Text.from_markup(f"[red]ERROR:[/] {escape(text)}")


def warn(text: str) -> Text:
    """Format text as a warning.

    Parameters
    ----------
    text : str
        The text to format

    Returns
    -------
        Text

    """
    return Text.from_markup(f"[magenta]WARNING:[/] {escape(text)}")


def shell(cmd: str, *, char: str = "+") -> Text:
    """Report a shell command in a dim white color.

    Parameters
    ----------
    cmd : str
        The shell command string to display

    char : str, optional
        A character to prefix the ``cmd`` with. (default: "+")

    Returns
    -------
        Text

    """
    return Text(f"{char}{cmd}", style="dim white")


def passed(msg: str, *, details: Iterable[str] | None = None) -> Text:
    """Report a backend that survived its liveness probe.

    Parameters
    ----------
    msg : str
        Text to display after the check mark

    details : Iterable[str], optional
        A sequence of text lines to diplay below the ``msg`` line

    Returns
    -------
        Text

    """
    return Text.from_markup(
        f"[bold green]✓[/] {escape(msg)}{_format_details(details)}"
    )


def failed(msg: str, *, details: Iterable[str] | None = None) -> Text:
    """Report a backend that failed its liveness probe.

    Parameters
    ----------
    msg : str
        Text to display after the cross mark

    details : Iterable[str], optional
        A sequence of text lines to diplay below the ``msg`` line

    Returns
    -------
        Text

    """
    return Text.from_markup(
        f"[bold red]✗[/] {escape(msg)}{_format_details(details)}"
    )
