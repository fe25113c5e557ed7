# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Provide the graphics backend configurations the launcher probes.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from . import defaults

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .util.types import EnvDict

__all__ = (
    "BACKENDS",
    "DEFAULT_LABEL",
    "BackendConfig",
    "make_backends",
    "select_backends",
)


@dataclass(frozen=True)
class BackendConfig:
    """A single step in the probing sequence."""

    #: Short key used to select this backend from the command line
    name: str

    #: Human readable label reported when a process is adopted
    label: str

    #: Environment variables to set (or override) for the launched process
    env: EnvDict = field(default_factory=dict)

    #: What is reported while trying this backend, if not ``label``
    attempt: str | None = None

    #: What is reported when this backend fails, if not ``label``
    failure: str | None = None

    @property
    def attempt_label(self) -> str:
        return self.attempt or self.label

    @property
    def failure_label(self) -> str:
        return self.failure or self.label

    def apply(self, base: EnvDict) -> EnvDict:
        """Return a copy of ``base`` extended with this backend's overrides.

        Parameters
        ----------
        base : EnvDict
            The environment to start from. It is not modified.

        """
        env = dict(base)
        env.update(self.env)
        return env


#: Label reported for the final attempt, which applies no overrides
DEFAULT_LABEL = "default renderer"


def make_backends(
    lavapipe_icd: str = defaults.LAVAPIPE_ICD,
) -> tuple[BackendConfig, ...]:
    """Build the fixed backend table, in probing order.

    Parameters
    ----------
    lavapipe_icd : str, optional
        Path to the lavapipe Vulkan ICD json file

    """
    return (
        BackendConfig(
            "opengl-software",
            "software OpenGL",
            {"LIBGL_ALWAYS_SOFTWARE": "1"},
            attempt="software OpenGL rendering",
            failure="Software OpenGL",
        ),
        BackendConfig(
            "vulkan-lavapipe",
            "Vulkan lavapipe",
            {"WGPU_BACKEND": "vulkan", "VK_ICD_FILENAMES": lavapipe_icd},
            attempt="Vulkan software rendering",
            failure="Vulkan",
        ),
    )


#: Backends to probe, in order, when none are selected explicitly
BACKENDS: tuple[BackendConfig, ...] = make_backends()


def select_backends(
    names: Iterable[str] | None,
    table: tuple[BackendConfig, ...] = BACKENDS,
) -> tuple[BackendConfig, ...]:
    """Choose (and order) entries from a backend table by name.

    Parameters
    ----------
    names : Iterable[str] | None
        Backend names in the order they should be probed. If None, the
        whole table is returned in its declared order.

    table : tuple[BackendConfig, ...], optional
        The table to select from

    Raises
    ------
        ValueError, if a name does not match any backend in the table

    """
    if names is None:
        return table

    by_name = {backend.name: backend for backend in table}
    selected = []
    for name in names:
        if name not in by_name:
            known = ", ".join(sorted(by_name))
            raise ValueError(f"Unknown backend {name!r} (known: {known})")
        selected.append(by_name[name])

    return tuple(selected)
