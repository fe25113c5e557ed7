#!/usr/bin/env python3

# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES.
#                         All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING

from setuptools import find_packages, setup

if TYPE_CHECKING:
    from typing import Final

ROOT_DIR: Final = Path(__file__).resolve().parent
PACKAGE_DIR: Final = ROOT_DIR / "src" / "python"


def read_version() -> str:
    r"""Read the package version without importing the package

    Returns
    -------
    version : str
        The value of ``__version__`` in the package ``__init__.py``

    Raises
    ------
    RuntimeError
        If the version is not found
    """
    init = PACKAGE_DIR / "ivsg_launcher" / "__init__.py"
    match = re.search(
        r'^__version__ = "([^"]+)"', init.read_text(), re.MULTILINE
    )
    if match is None:
        raise RuntimeError(f"ERROR: Did not find __version__ in {init}")
    return match.group(1)


packages = find_packages(
    where="src/python", include=["ivsg_launcher", "ivsg_launcher.*"]
)

setup(
    name="ivsg-launcher",
    version=read_version(),
    description=(
        "Launch IVSG under the first graphics backend that keeps it running"
    ),
    python_requires=">=3.10",
    packages=packages,
    package_dir={"": "src/python"},
    package_data={pack: ["py.typed"] for pack in packages},
    include_package_data=True,
    install_requires=["psutil", "rich"],
    extras_require={"test": ["pytest", "pytest-mock"]},
    entry_points={
        "console_scripts": ["ivsg-launch = ivsg_launcher:main"],
    },
    zip_safe=False,
)
