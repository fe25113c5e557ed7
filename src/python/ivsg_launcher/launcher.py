# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pathlib import Path

from rich import print as rich_print

from .config import Config
from .logger import LOG
from .prober import BackendProber
from .system import LaunchSystem, format_command
from .util.ui import banner, error, warn

__all__ = ("launcher_main",)


def prepare_launcher(argv: list[str]) -> tuple[Config, BackendProber]:
    try:
        config = Config(argv)
    except Exception:
        rich_print(error("Could not configure launcher:\n"))
        raise

    LOG.set_color(config.info.color)

    system = LaunchSystem(dry_run=config.dry_run)

    try:
        prober = BackendProber(
            system,
            grace=config.probe.grace,
            reject=config.probe.reject,
            verbose=config.info.verbose,
        )
    except Exception:
        rich_print(error("Could not initialize launcher:\n"))
        raise

    return config, prober


def list_backends(config: Config) -> str:
    """Describe the known backends, in default probing order."""
    return "\n".join(
        f"{backend.name: <16} {backend.label}: "
        + (format_command((), backend.env) or "(no overrides)")
        for backend in config.known_backends
    )


def launcher_main(argv: list[str]) -> int:
    """A main function for the launcher that can be used programmatically
    or by entry-points.

    Parameters
    ----------
        argv : list[str]
            Command-line arguments to start the launcher with

    Returns
    -------
        int, a process return code

    """
    config, prober = prepare_launcher(argv)

    if config.other.list_backends:
        LOG(banner("Known backends", list_backends(config)))
        return 0

    if config.info.verbose:
        icd = config.target.lavapipe_icd
        if (
            any(b.name == "vulkan-lavapipe" for b in config.backends)
            and not Path(icd).exists()
        ):
            LOG(warn(f"lavapipe ICD file {icd} does not exist"))

    result = prober.launch(config.cmd, config.backends)
    return result.returncode
