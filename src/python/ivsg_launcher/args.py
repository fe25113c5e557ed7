# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide an argparse ArgumentParser for the launcher.

"""

from __future__ import annotations

from argparse import ArgumentParser, ArgumentTypeError
from math import isfinite

from . import defaults
from .util.types import ArgList, RejectPolicy

__all__ = (
    "ACCUMULATING_OPTIONS",
    "REJECT_POLICIES",
    "drop_overridden",
    "parser",
)

REJECT_POLICIES: tuple[RejectPolicy, ...] = ("reap", "abandon")


def _grace(value: str) -> float:
    try:
        grace = float(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid grace period: {value!r}")
    if not isfinite(grace) or grace < 0:
        raise ArgumentTypeError(
            f"grace period must be a finite number >= 0, got {value}"
        )
    return grace


#: The argument parser for the launcher
parser = ArgumentParser(
    prog="ivsg-launch",
    allow_abbrev=False,
    description="Launch IVSG, trying software graphics backends in turn",
    epilog=(
        "Arguments after '--' are passed on to the executable. Options may "
        f"also be given in the {defaults.CONFIG_ENV_VAR} environment variable"
    ),
)

target = parser.add_argument_group("Target program")

target.add_argument(
    "--executable",
    dest="executable",
    default=defaults.EXECUTABLE,
    help="Path of the program to launch (default: %(default)s)",
)

target.add_argument(
    "--lavapipe-icd",
    dest="lavapipe_icd",
    default=defaults.LAVAPIPE_ICD,
    help="Vulkan ICD file for the lavapipe backend (default: %(default)s)",
)

probe = parser.add_argument_group("Backend probing")

probe.add_argument(
    "--backend",
    dest="backends",
    action="extend",
    type=lambda s: [x for x in s.split(",") if x],
    default=None,
    help="Backends to try, in order (repeatable, or comma separated). "
    "Defaults to every known backend",
)

probe.add_argument(
    "--grace",
    dest="grace",
    type=_grace,
    default=defaults.GRACE_PERIOD,
    help="Seconds a process must stay up to be adopted (default: "
    "%(default)s)",
)

probe.add_argument(
    "--reject",
    dest="reject",
    choices=REJECT_POLICIES,
    default=defaults.REJECT_POLICY,
    help="What to do with processes that fail the liveness check: "
    "terminate and reap them, or leave them running (default: %(default)s)",
)

info = parser.add_argument_group("Informational")

info.add_argument(
    "-v",
    "--verbose",
    dest="verbose",
    action="store_true",
    default=False,
    help="Print commands, launch states and the reason each backend failed",
)

info.add_argument(
    "--color",
    dest="color",
    action="store_true",
    default=False,
    help="Whether to use color terminal output",
)

other = parser.add_argument_group("Other options")

other.add_argument(
    "--dry-run",
    dest="dry_run",
    action="store_true",
    default=False,
    help="Print the commands that would be run, without running them",
)

other.add_argument(
    "--list-backends",
    dest="list_backends",
    action="store_true",
    default=False,
    help="Print the known backends and exit",
)

#: Options whose values add up, rather than replace each other, when given
#: more than once
ACCUMULATING_OPTIONS = ("--backend",)


def drop_overridden(env_args: ArgList, cli_args: ArgList) -> ArgList:
    """Remove accumulating options from environment-sourced arguments when
    the command line gives the same option.

    Parameters
    ----------
    env_args : ArgList
        Arguments taken from the configuration environment variable

    cli_args : ArgList
        Arguments given on the command line, without the program name

    Returns
    -------
        ArgList

    """
    if "--" in cli_args:
        cli_args = cli_args[: cli_args.index("--")]

    given = {
        opt
        for opt in ACCUMULATING_OPTIONS
        for arg in cli_args
        if arg == opt or arg.startswith(f"{opt}=")
    }

    kept: ArgList = []
    skip_value = False
    for i, arg in enumerate(env_args):
        if arg == "--":
            kept.extend(env_args[i:])
            break
        if skip_value:
            skip_value = False
        elif arg in given:
            skip_value = True
        elif not any(arg.startswith(f"{opt}=") for opt in given):
            kept.append(arg)

    return kept
