# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ivsg_launcher.logger import LOG
from ivsg_launcher.system import FailedProcess

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from ivsg_launcher.system import ProcessHandle
    from ivsg_launcher.util.types import EnvDict


class FakeProcess:
    """A process that is either up for good or already gone."""

    def __init__(self, pid: int, alive: bool, returncode: int = 0) -> None:
        self.pid = pid
        self._alive = alive
        self._returncode = returncode
        self.waited = False

    @property
    def returncode(self) -> int | None:
        return None if self._alive else self._returncode

    def is_alive(self) -> bool:
        return self._alive

    def wait(self) -> int:
        self.waited = True
        self._alive = False
        return self._returncode


class FakeSystem:
    """Record what the prober asks for, and hand out queued processes."""

    def __init__(self, final_returncode: int = 0) -> None:
        self.env: EnvDict = {"PATH": "/usr/bin", "LIBGL_ALWAYS_SOFTWARE": "0"}
        self.dry_run = False
        self.final_returncode = final_returncode
        self.handles: list[ProcessHandle] = []
        self.spawned: list[tuple[tuple[str, ...], EnvDict]] = []
        self.runs: list[tuple[tuple[str, ...], EnvDict]] = []
        self.sleeps: list[float] = []
        self.reaped: list[ProcessHandle] = []

    def queue(self, *handles: ProcessHandle) -> FakeSystem:
        self.handles.extend(handles)
        return self

    def spawn(self, cmd: Sequence[str], *, env: EnvDict) -> ProcessHandle:
        self.spawned.append((tuple(cmd), env))
        return self.handles.pop(0)

    def run(self, cmd: Sequence[str], *, env: EnvDict) -> int:
        self.runs.append((tuple(cmd), env))
        return self.final_returncode

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)

    def reap(self, handle: ProcessHandle) -> None:
        self.reaped.append(handle)


@pytest.fixture(autouse=True)
def clear_log() -> Iterator[None]:
    LOG.clear()
    yield
    LOG.clear()


@pytest.fixture
def system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def alive() -> Callable[..., FakeProcess]:
    def make(pid: int = 100, returncode: int = 0) -> FakeProcess:
        return FakeProcess(pid, True, returncode)

    return make


@pytest.fixture
def dead() -> Callable[..., FakeProcess]:
    def make(pid: int = 100, returncode: int = 1) -> FakeProcess:
        return FakeProcess(pid, False, returncode)

    return make


@pytest.fixture
def unstartable() -> Callable[[], FailedProcess]:
    def make() -> FailedProcess:
        return FailedProcess(FileNotFoundError(2, "No such file", "ivsg"))

    return make
