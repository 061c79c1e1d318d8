#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: exceptions.py

Description:
------------
Exception types for the cpuinfo_parser package.

ParseFailure is raised internally by the decoders and field parsers and is
converted once, by parse_cpuinfo(), into a MalformedInputError.
"""

from enum import Enum
from typing import Optional


class ParseKind(Enum):
    """Category of a parse failure."""

    FIELD = "malformed field"
    SEPARATOR = "malformed separator"
    VALUE = "malformed value"
    RECORD_BOUNDARY = "malformed record boundary"
    EMPTY_INPUT = "empty input"


class ParseFailure(Exception):
    """Low-level failure raised at the point where matching stopped."""

    def __init__(
        self,
        kind: ParseKind,
        position: int,
        field: Optional[str] = None,
        detail: str = "",
    ):
        self.kind = kind
        self.position = position
        self.field = field
        self.detail = detail
        where = f" in field '{field}'" if field else ""
        suffix = f": {detail}" if detail else ""
        super().__init__(f"{kind.value}{where} at offset {position}{suffix}")


class CpuinfoError(Exception):
    """Base exception for all cpuinfo_parser errors."""

    pass


class MalformedInputError(CpuinfoError):
    """Exception raised when a processor listing cannot be parsed."""

    def __init__(
        self,
        kind: ParseKind,
        position: int,
        line: int,
        column: int,
        field: Optional[str] = None,
        detail: str = "",
    ):
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        self.field = field
        self.detail = detail
        where = f" (field '{field}')" if field else ""
        suffix = f": {detail}" if detail else ""
        super().__init__(
            f"Malformed input at line {line}, column {column}{where}: "
            f"{kind.value}{suffix}"
        )


class SourceError(CpuinfoError):
    """Exception raised when the listing text cannot be read."""

    pass


class ConfigError(CpuinfoError):
    """Exception raised when there's a configuration error."""

    pass
