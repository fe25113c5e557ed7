# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Default configuration values

"""

from __future__ import annotations

import platform

from .util.types import RejectPolicy

#: Value to use if --executable is not specified.
EXECUTABLE = "target/debug/ivsg"

#: Value to use if --grace is not specified (seconds).
GRACE_PERIOD = 2.0

#: Value to use if --reject is not specified.
REJECT_POLICY: RejectPolicy = "reap"

#: Value to use if --lavapipe-icd is not specified.
LAVAPIPE_ICD = (
    f"/usr/share/vulkan/icd.d/lvp_icd.{platform.machine() or 'x86_64'}.json"
)

#: Environment variable holding extra launcher options.
CONFIG_ENV_VAR = "IVSG_LAUNCHER_CONFIG"

#: Seconds to wait for a terminated process before killing it outright.
REAP_TIMEOUT = 3.0

# Exit codes the shell reports for commands that could not be started.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
