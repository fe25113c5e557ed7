# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Consolidate launcher configuration from command-line and environment.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .args import parser
from .backends import make_backends, select_backends
from .util.types import DataclassMixin, object_to_dataclass

if TYPE_CHECKING:
    from .backends import BackendConfig
    from .util.types import ArgList, Command, RejectPolicy

__all__ = ("Config",)


@dataclass(frozen=True)
class Target(DataclassMixin):
    executable: str
    lavapipe_icd: str


@dataclass(frozen=True)
class Probe(DataclassMixin):
    backends: list[str] | None
    grace: float
    reject: RejectPolicy


@dataclass(frozen=True)
class Info(DataclassMixin):
    verbose: bool
    color: bool


@dataclass(frozen=True)
class Other(DataclassMixin):
    dry_run: bool
    list_backends: bool


class Config:
    """A centralized configuration object that provides the information
    needed to launch the target program.

    Parameters
    ----------
    argv : ArgList
        command-line arguments to use when building the configuration

    Raises
    ------
        ValueError, if an unknown backend is requested

    """

    def __init__(self, argv: ArgList) -> None:
        self.argv = argv

        argv = list(argv[1:])
        if "--" in argv:
            split = argv.index("--")
            argv, self._extra_args = argv[:split], argv[split + 1 :]
        else:
            self._extra_args = []

        args = parser.parse_args(argv)

        # only saving this for help with testing
        self._args = args

        self.target = object_to_dataclass(args, Target)
        self.probe = object_to_dataclass(args, Probe)
        self.info = object_to_dataclass(args, Info)
        self.other = object_to_dataclass(args, Other)

        self.known_backends = make_backends(self.target.lavapipe_icd)
        self.backends = self._compute_backends()

    @property
    def dry_run(self) -> bool:
        """Whether a dry run is configured."""
        return self.other.dry_run

    @property
    def extra_args(self) -> ArgList:
        """Extra command-line arguments to pass on to the executable."""
        return self._extra_args

    @property
    def cmd(self) -> Command:
        """The full command to launch under each backend."""
        return (self.target.executable, *self.extra_args)

    def _compute_backends(self) -> tuple[BackendConfig, ...]:
        return select_backends(self.probe.backends, self.known_backends)
