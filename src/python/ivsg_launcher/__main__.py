# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
if __name__ == "__main__":
    import sys

    import ivsg_launcher

    sys.exit(ivsg_launcher.main())
