# Copyright 2023 Lawrence Livermore National Security, LLC
# See the top-level LICENSE file for details.
#
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="realparent",
    version="0.1.0",
    description="Symlink-aware parent and clean operations for filesystem paths",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(include=["realparent", "realparent.*"]),
    install_requires=[
        "loguru",  # Logging
        "tomlkit",  # Config file that preserves formatting and comments
        "networkx",  # Simulated filesystem graph
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
