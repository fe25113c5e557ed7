# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide a LaunchSystem class to encapsulate starting, probing and
collecting the processes the launcher runs.

"""

from __future__ import annotations

import os
import shlex
import sys
import time
from contextlib import suppress
from subprocess import Popen, TimeoutExpired, run as stdlib_run
from typing import TYPE_CHECKING, Protocol

import psutil

from . import defaults

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .util.types import EnvDict

__all__ = (
    "FailedProcess",
    "LaunchSystem",
    "Process",
    "ProcessHandle",
    "exit_status",
    "format_command",
    "spawn_error_status",
)


def exit_status(returncode: int) -> int:
    """Convert a subprocess return code into a shell-style exit status.

    Processes killed by a signal report a negative return code, which
    becomes ``128 + signum`` in the same way a POSIX shell reports it.

    """
    return 128 - returncode if returncode < 0 else returncode


def spawn_error_status(exc: OSError) -> int:
    """The exit status a shell reports when it cannot start a command."""
    if isinstance(exc, FileNotFoundError):
        return defaults.EXIT_NOT_FOUND
    return defaults.EXIT_NOT_EXECUTABLE


def format_command(cmd: Sequence[str], env: EnvDict | None = None) -> str:
    """Render a command, with its environment overrides, as a shell line.

    Parameters
    ----------
    cmd : Sequence[str]
        The command and its arguments

    env : EnvDict, optional
        Environment variable overrides to show as ``NAME=value`` prefixes

    """
    prefix = [f"{k}={shlex.quote(v)}" for k, v in (env or {}).items()]
    return " ".join(prefix + [shlex.quote(part) for part in cmd])


class ProcessHandle(Protocol):
    """A process started by the launcher, as seen by the prober."""

    @property
    def pid(self) -> int | None:
        """The OS process id, or None if the process never started."""
        ...

    @property
    def returncode(self) -> int | None:
        """The exit status, or None if the process is still running."""
        ...

    def is_alive(self) -> bool:
        """Check, without blocking, whether the process is still running."""
        ...

    def wait(self) -> int:
        """Block until the process exits and return its exit status."""
        ...


class Process:
    """A running child process backed by ``subprocess.Popen``.

    Parameters
    ----------
    proc : Popen
        The started process

    """

    def __init__(self, proc: Popen[bytes]) -> None:
        self._proc = proc

    @property
    def pid(self) -> int:
        return self._proc.pid

    @property
    def returncode(self) -> int | None:
        """The exit status if the process has been reaped, else None."""
        if self._proc.returncode is None:
            return None
        return exit_status(self._proc.returncode)

    def is_alive(self) -> bool:
        # poll() also reaps the child if it has exited
        return self._proc.poll() is None

    def wait(self, timeout: float | None = None) -> int:
        return exit_status(self._proc.wait(timeout))

    def terminate(self) -> None:
        self._proc.terminate()

    def kill(self) -> None:
        self._proc.kill()


class FailedProcess:
    """Stand-in for a process that the OS refused to start.

    Parameters
    ----------
    error : OSError
        The error raised while trying to start the process

    """

    pid = None

    def __init__(self, error: OSError) -> None:
        self.error = error
        self.returncode = spawn_error_status(error)

    def is_alive(self) -> bool:
        return False

    def wait(self) -> int:
        return self.returncode


class LaunchSystem:
    """Encapsulate details of the current system and the mechanics of
    starting, probing and collecting child processes.

    Parameters
    ----------
    dry_run : bool, optional
        If True, no processes are actually started (default: False)

    """

    def __init__(self, *, dry_run: bool = False) -> None:
        self.env = dict(os.environ)
        self.dry_run = dry_run

    def spawn(self, cmd: Sequence[str], *, env: EnvDict) -> ProcessHandle:
        """Start a command in the background and return immediately.

        Parameters
        ----------
        cmd : Sequence[str]
            The command to start

        env : EnvDict
            The complete environment for the new process

        Returns
        -------
            ProcessHandle. If the process could not be started, the handle
            reports itself as not alive.

        """
        _flush()
        try:
            proc = Popen(list(cmd), env=env)
        except OSError as e:
            return FailedProcess(e)
        return Process(proc)

    def run(self, cmd: Sequence[str], *, env: EnvDict) -> int:
        """Run a command in the foreground and return its exit status.

        Parameters
        ----------
        cmd : Sequence[str]
            The command to run

        env : EnvDict
            The complete environment for the new process

        """
        _flush()
        try:
            proc = stdlib_run(list(cmd), env=env)
        except OSError as e:
            return spawn_error_status(e)
        return exit_status(proc.returncode)

    def sleep(self, seconds: float) -> None:
        """Suspend the calling thread for ``seconds``."""
        time.sleep(seconds)

    def reap(
        self, handle: ProcessHandle, *, timeout: float = defaults.REAP_TIMEOUT
    ) -> None:
        """Terminate a process, and any descendants it started, then
        collect its exit status.

        Processes that ignore the termination request for ``timeout``
        seconds are killed.

        Parameters
        ----------
        handle : ProcessHandle
            The process to dispose of

        timeout : float, optional
            Seconds to wait after terminating before killing

        """
        if not isinstance(handle, Process) or not handle.is_alive():
            return

        try:
            descendants = psutil.Process(handle.pid).children(recursive=True)
        except psutil.NoSuchProcess:
            descendants = []

        # the direct child is collected through Popen so its status is kept
        handle.terminate()
        for proc in descendants:
            with suppress(psutil.NoSuchProcess):
                proc.terminate()

        _, alive = psutil.wait_procs(descendants, timeout=timeout)
        for proc in alive:
            with suppress(psutil.NoSuchProcess):
                proc.kill()

        try:
            handle.wait(timeout)
        except TimeoutExpired:
            handle.kill()
            handle.wait()


def _flush() -> None:
    # keep our own output ordered ahead of anything the child prints
    sys.stdout.flush()
    sys.stderr.flush()
