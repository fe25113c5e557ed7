# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from .backends import BACKENDS, BackendConfig
from .prober import BackendProber, LaunchResult
from .system import LaunchSystem

__version__ = "0.1.0"

__all__ = (
    "BACKENDS",
    "BackendConfig",
    "BackendProber",
    "LaunchResult",
    "LaunchSystem",
    "main",
)


def main() -> int:
    import os, shlex, sys

    from . import defaults
    from .args import drop_overridden
    from .launcher import launcher_main as _main

    # Options may be given in IVSG_LAUNCHER_CONFIG as well as on the command
    # line. They are spliced in before sys.argv, and argparse uses the last
    # value for any option given twice, so the command line takes precedence.
    # Accumulating options are dropped from the environment when the
    # command line also gives them.
    env_args = shlex.split(os.environ.get(defaults.CONFIG_ENV_VAR, ""))
    env_args = drop_overridden(env_args, sys.argv[1:])
    argv = sys.argv[:1] + env_args + sys.argv[1:]

    return _main(argv)
