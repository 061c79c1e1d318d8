#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="cpuinfo_parser",
    version="1.0.0",
    packages=find_packages(include=["cpuinfo_parser", "cpuinfo_parser.*"]),
    install_requires=[
        "loguru>=0.6.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "yaml": ["PyYAML>=6.0"],
        "test": ["pytest>=7.0.0", "PyYAML>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "cpuinfo-parser=cpuinfo_parser.cli:main",
        ],
    },
    description="Parse processor information listings into typed records",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Hardware",
    ],
    python_requires=">=3.10",
)
