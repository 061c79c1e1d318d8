#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: source.py

Description:
------------
Reading processor listing text from disk.
"""

from pathlib import Path
from typing import Union

from loguru import logger

from .exceptions import SourceError

PathLike = Union[str, Path]

DEFAULT_CPUINFO_PATH = Path("/proc/cpuinfo")


def normalize_listing(text: str) -> str:
    """
    Collapse trailing line breaks to exactly one.

    The kernel ends the listing with a blank line after the last record;
    the document grammar does not allow it.
    """
    stripped = text.rstrip("\r\n")
    if not stripped:
        return ""
    newline = "\r\n" if text.endswith("\r\n") else "\n"
    return stripped + newline


def read_cpuinfo(path: PathLike = DEFAULT_CPUINFO_PATH) -> str:
    """
    Read a processor listing from a file.

    Args:
        path: File to read, /proc/cpuinfo by default.

    Returns:
        The listing text with trailing blank lines removed.

    Raises:
        SourceError: If the file cannot be read.
    """
    path = Path(path)
    logger.debug(f"Reading processor listing from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise SourceError(f"Cannot read processor listing from {path}: {e}") from e
    return normalize_listing(text)
