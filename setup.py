# SPDX-FileCopyrightText: 2025 Lagrange Consensus contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="lagrange-consensus",
    version="0.1.0",
    description="Exact Lagrange secret recovery with majority voting over share subsets",
    author="Lagrange Consensus contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "PyYAML<7.0,>=6.0",
        "tqdm>=4.66.0",
        "tabulate>=0.9",
    ],
    extras_require={
        # dev / testing
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "lagrange-consensus=lagrange_consensus.cli:main",
        ],
    },
)
