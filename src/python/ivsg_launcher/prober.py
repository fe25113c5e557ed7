# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide a BackendProber class to try graphics backends one after another
until the launched program stays up.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import isfinite
from typing import TYPE_CHECKING

from rich.text import Text

from . import defaults
from .backends import DEFAULT_LABEL
from .liveness import looks_alive
from .logger import LOG
from .system import FailedProcess, format_command
from .util.ui import failed, passed, shell

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .backends import BackendConfig
    from .liveness import LivenessCheck
    from .system import LaunchSystem, ProcessHandle
    from .util.types import RejectPolicy

__all__ = ("Attempt", "BackendProber", "LaunchResult", "LaunchState")


class LaunchState(Enum):
    PROBING = "probing"
    ADOPTED = "adopted"
    FINAL_ATTEMPT = "final attempt"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Attempt:
    """Record of a single liveness probe."""

    #: The backend configuration that was tried
    backend: BackendConfig

    #: The id of the started process, None if it could not be started
    pid: int | None

    #: Whether the process passed its liveness check
    alive: bool


@dataclass(frozen=True)
class LaunchResult:
    """The outcome of a complete launch."""

    #: Exit status of the adopted (or final) process
    returncode: int

    #: Every probe that was made, in order
    attempts: tuple[Attempt, ...] = ()

    #: The backend whose process was adopted, None if the fallback ran
    adopted: BackendConfig | None = None

    @property
    def fallback(self) -> bool:
        """Whether the final, unconditional attempt was made."""
        return self.adopted is None


class BackendProber:
    """Start a program under successive backend configurations, and adopt
    the first one whose process survives its liveness check.

    Parameters
    ----------
    system : LaunchSystem
        Process execution wrapper

    grace : float, optional
        Seconds to wait after starting each process before checking it

    check : LivenessCheck, optional
        Policy that decides whether a started process is working

    reject : RejectPolicy, optional
        Whether to ``"reap"`` or ``"abandon"`` processes that fail the check

    verbose : bool, optional
        Whether to report commands, state changes and failure reasons

    """

    def __init__(
        self,
        system: LaunchSystem,
        *,
        grace: float = defaults.GRACE_PERIOD,
        check: LivenessCheck = looks_alive,
        reject: RejectPolicy = defaults.REJECT_POLICY,
        verbose: bool = False,
    ) -> None:
        if not isfinite(grace) or grace < 0:
            raise ValueError(
                f"Grace period must be finite and non-negative, got {grace}"
            )
        if reject not in ("reap", "abandon"):
            raise ValueError(f"Unknown reject policy {reject!r}")

        self.system = system
        self.grace = grace
        self.check = check
        self.reject = reject
        self.verbose = verbose
        self.state = LaunchState.PROBING

    def launch(
        self, cmd: Sequence[str], backends: Iterable[BackendConfig]
    ) -> LaunchResult:
        """Probe each backend in order, then fall back to an unmodified
        environment if none of them stays up.

        Parameters
        ----------
        cmd : Sequence[str]
            The program to launch, followed by any arguments

        backends : Iterable[BackendConfig]
            Backend configurations to try, in order

        Returns
        -------
            LaunchResult

        """
        LOG("Attempting to launch IVSG with WSL2-compatible graphics...")

        if self.system.dry_run:
            return self._dry_run(cmd, backends)

        attempts: list[Attempt] = []

        for backend in backends:
            self._enter(LaunchState.PROBING, backend.label)
            LOG(f"Trying {backend.attempt_label}...")
            self._show(cmd, backend)

            handle = self.system.spawn(
                cmd, env=backend.apply(self.system.env)
            )
            alive = self.check(handle, self.grace, self.system)
            attempts.append(Attempt(backend, handle.pid, alive))

            if alive:
                LOG(
                    passed(f"Running with {backend.label} (PID: {handle.pid})")
                )
                self._enter(LaunchState.ADOPTED, backend.label)
                return self._finish(handle.wait(), attempts, backend)

            if self.reject == "reap":
                self.system.reap(handle)
            LOG(
                failed(
                    f"{backend.failure_label} failed",
                    details=self._why(handle),
                )
            )

        self._enter(LaunchState.FINAL_ATTEMPT, DEFAULT_LABEL)
        LOG(f"Trying {DEFAULT_LABEL}...")
        self._show(cmd)

        returncode = self.system.run(cmd, env=dict(self.system.env))
        return self._finish(returncode, attempts, None)

    def _finish(
        self,
        returncode: int,
        attempts: list[Attempt],
        adopted: BackendConfig | None,
    ) -> LaunchResult:
        self._enter(LaunchState.TERMINATED, f"exit status {returncode}")
        return LaunchResult(returncode, tuple(attempts), adopted)

    def _dry_run(
        self, cmd: Sequence[str], backends: Iterable[BackendConfig]
    ) -> LaunchResult:
        for backend in backends:
            LOG(f"Trying {backend.attempt_label}...")
            LOG(shell(format_command(cmd, backend.env)))
        LOG(f"Trying {DEFAULT_LABEL}...")
        LOG(shell(format_command(cmd)))
        return LaunchResult(0)

    def _enter(self, state: LaunchState, detail: str) -> None:
        self.state = state
        if self.verbose:
            LOG(Text(f"[{state.value}] {detail}", style="dim"))

    def _show(
        self, cmd: Sequence[str], backend: BackendConfig | None = None
    ) -> None:
        if self.verbose:
            LOG(shell(format_command(cmd, backend.env if backend else None)))

    def _why(self, handle: ProcessHandle) -> list[str] | None:
        if not self.verbose:
            return None
        if isinstance(handle, FailedProcess):
            return [f"could not be started: {handle.error}"]
        if handle.returncode is not None:
            return [f"exited with status {handle.returncode}"]
        return ["did not pass the liveness check"]
