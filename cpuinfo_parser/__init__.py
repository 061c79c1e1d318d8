#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: __init__.py

Description:
------------
This package parses processor information listings (the /proc/cpuinfo
format: one block of "name : value" lines per logical processor, blocks
separated by a blank line) into immutable, typed records.

Parsing is strict and single pass: every field must be present, in the
kernel's order, and the first mismatch aborts the parse with a
MalformedInputError describing where matching stopped.
"""

__version__ = "1.0.0"
__license__ = "GPL-3.0-or-later"

import sys

from loguru import logger

from .models import AddressSizes, Cpu, CpuInfo
from .exceptions import (
    CpuinfoError,
    MalformedInputError,
    SourceError,
    ConfigError,
    ParseKind,
)
from .parser import parse_cpuinfo, parse_cpuinfo_file
from .source import read_cpuinfo, DEFAULT_CPUINFO_PATH
from .options import CliOptions, OutputFormat
from .writers import WriterFactory

# Remove default handler and add custom one
logger.remove()
logger.add(
    sys.stderr,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
    level="INFO",
)


def get_tool_info() -> dict:
    """
    Return metadata about this tool for discovery by a host application.

    Returns:
        Dict containing tool metadata including name, version, description,
        available functions, requirements, and platform compatibility.
    """
    return {
        "name": "cpuinfo_parser",
        "version": __version__,
        "description": "Parse processor information listings into typed records",
        "license": __license__,
        "supported": True,
        "platform": ["linux"],
        "functions": [
            "parse_cpuinfo",
            "parse_cpuinfo_file",
            "read_cpuinfo",
        ],
        "requirements": ["loguru", "typer", "rich"],
        "capabilities": [
            "cpuinfo_parsing",
            "topology_summary",
            "json_export",
            "csv_export",
            "yaml_export",
        ],
        "classes": {
            "CpuInfo": "Ordered collection of processor records",
            "Cpu": "Attributes of one logical processor",
            "WriterFactory": "Serializers for parsed listings",
        },
    }


__all__ = [
    "AddressSizes",
    "Cpu",
    "CpuInfo",
    "CpuinfoError",
    "MalformedInputError",
    "SourceError",
    "ConfigError",
    "ParseKind",
    "CliOptions",
    "OutputFormat",
    "WriterFactory",
    "DEFAULT_CPUINFO_PATH",
    "parse_cpuinfo",
    "parse_cpuinfo_file",
    "read_cpuinfo",
    "get_tool_info",
    "logger",
]
