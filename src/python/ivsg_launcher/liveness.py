# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Policies for deciding whether a freshly started process is working.

A process that is still running some time after it was started is only
*probably* healthy. The check is kept behind the ``LivenessCheck``
protocol so that a stronger readiness signal can replace it without
changing how backends are sequenced.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .system import LaunchSystem, ProcessHandle

__all__ = ("LivenessCheck", "looks_alive")


class LivenessCheck(Protocol):
    def __call__(
        self, handle: ProcessHandle, grace: float, system: LaunchSystem
    ) -> bool:
        """Decide whether ``handle`` should be adopted.

        Parameters
        ----------
        handle : ProcessHandle
            The process that was just started

        grace : float
            Seconds the process is given to prove itself

        system : LaunchSystem
            Process execution wrapper

        """
        ...


def looks_alive(
    handle: ProcessHandle, grace: float, system: LaunchSystem
) -> bool:
    """Wait out the grace period, then check the process is still running.

    A process that could not be started at all is never alive, but the
    grace period is still waited so that every attempt takes the same time.

    """
    system.sleep(grace)
    return handle.is_alive()
