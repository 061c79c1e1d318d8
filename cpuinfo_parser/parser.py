#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: parser.py

Description:
------------
Record and document assembly for processor listings, and the parse_cpuinfo()
entry point.

The scan is a single left-to-right pass over the text. The first failure
aborts the whole parse; nothing is retried or skipped.
"""

from typing import List, Tuple

from loguru import logger

from . import primitives
from .exceptions import MalformedInputError, ParseFailure, ParseKind
from .fields import FIELDS
from .models import Cpu, CpuInfo
from .source import PathLike, read_cpuinfo


def parse_record(text: str, pos: int = 0) -> Tuple[Cpu, int]:
    """
    Parse one processor record starting at ``pos``.

    Every field in FIELDS must appear exactly once and in order.

    Returns:
        The Cpu and the position just past the record's last line terminator.
    """
    values = {}
    for spec in FIELDS:
        values[spec.attribute], pos = spec.parse(text, pos)
    return Cpu(**values), pos


def parse_document(text: str) -> Tuple[Cpu, ...]:
    """
    Parse one or more records separated by single blank lines.

    The text must end exactly at the last record's line terminator.
    """
    if not text.strip():
        raise ParseFailure(ParseKind.EMPTY_INPUT, 0, detail="no processor records")

    cpus: List[Cpu] = []
    cpu, pos = parse_record(text, 0)
    cpus.append(cpu)

    while pos < len(text):
        try:
            next_pos = primitives.line_end(text, pos)
        except ParseFailure as failure:
            raise ParseFailure(
                ParseKind.RECORD_BOUNDARY,
                pos,
                detail="expected a blank line between records",
            ) from failure
        if next_pos == len(text):
            raise ParseFailure(
                ParseKind.RECORD_BOUNDARY,
                pos,
                detail="unexpected blank line after the last record",
            )
        if primitives.LINE_END_PATTERN.match(text, next_pos):
            raise ParseFailure(
                ParseKind.RECORD_BOUNDARY,
                next_pos,
                detail="more than one blank line between records",
            )
        cpu, pos = parse_record(text, next_pos)
        cpus.append(cpu)

    return tuple(cpus)


def _line_and_column(text: str, pos: int) -> Tuple[int, int]:
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column


def parse_cpuinfo(text: str) -> CpuInfo:
    """
    Parse the full text of a processor listing.

    Args:
        text: Verbatim listing text, every line terminated by a line break.

    Returns:
        CpuInfo holding one Cpu per record, in input order.

    Raises:
        MalformedInputError: If the text does not match the listing grammar.
    """
    try:
        cpus = parse_document(text)
    except ParseFailure as failure:
        line, column = _line_and_column(text, failure.position)
        logger.debug(f"Parsing stopped at line {line}, column {column}: {failure}")
        raise MalformedInputError(
            kind=failure.kind,
            position=failure.position,
            line=line,
            column=column,
            field=failure.field,
            detail=failure.detail,
        ) from failure

    logger.debug(f"Parsed {len(cpus)} processor record(s)")
    return CpuInfo(cpus=cpus)


def parse_cpuinfo_file(path: PathLike) -> CpuInfo:
    """Read a listing from ``path`` and parse it."""
    return parse_cpuinfo(read_cpuinfo(path))
